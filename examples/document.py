# document.py

import sys
import json
import argparse
from treeline import print_tree
from treeline.adapters import ValueItem

def main():
    parser = argparse.ArgumentParser(description='Print a JSON document as a tree')
    parser.add_argument('file', nargs='?', help='JSON file (default: stdin)')
    args = parser.parse_args()

    if args.file:
        with open(args.file) as f:
            data = json.load(f)
    else:
        data = json.load(sys.stdin)

    print_tree(ValueItem(data, args.file or "<stdin>"))

if __name__ == "__main__":
    main()
