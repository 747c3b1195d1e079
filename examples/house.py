# house.py

import argparse
from treeline import (
    TreeBuilder, PrintConfig, Style, StyleWhen, UTF_CHARS_BOLD,
    config_from_env, print_tree_with,
)

def build_house():
    return (
        TreeBuilder("house")
        .begin_child("living room")
            .add_empty_child("TV")
            .add_empty_child("couch")
        .end_child()
        .begin_child("kitchen")
            .add_empty_child("stove")
            .add_empty_child("refrigerator")
            .add_empty_child("table")
        .end_child()
        .begin_child("bathroom")
            .add_empty_child("toilet")
            .add_empty_child("shower")
        .end_child()
        .begin_child("bedroom")
            .begin_child("wardrobe")
                .add_empty_child("closet")
                .add_empty_child("shelves")
                .add_empty_child("clothes")
            .end_child()
            .add_empty_child("bed")
        .end_child()
        .build()
    )

def main():
    parser = argparse.ArgumentParser(description='Print a house as a styled tree')
    parser.add_argument('--force-color', action='store_true',
        help='Style the output even when it is not a terminal')
    args = parser.parse_args()

    config = config_from_env()
    config.branch = Style(foreground="red", background="yellow", dimmed=True)
    config.leaf = Style(bold=True)
    config.characters = UTF_CHARS_BOLD
    config.indent = 4
    if args.force_color:
        config.styled = StyleWhen.ALWAYS

    print_tree_with(build_house(), config)

if __name__ == "__main__":
    main()
