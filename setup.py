from setuptools import setup, find_packages

setup(
    name="treeline",
    version="0.1.0",
    description="Pretty-print tree-like structures",
    packages=find_packages(include=["treeline", "treeline.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["treeline=treeline.__main__:main"],
    },
    python_requires=">=3.11",
)
