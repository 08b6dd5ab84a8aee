# simplecraft/main.py
import argparse
import sys
from typing import List, Optional

from simplecraft.config import DATA_DIR, LOG_LEVEL, RETURN_ITEMS_ON_FAIL, parse_bool_param
from simplecraft.core.game_manager import GameManager
from simplecraft.utils.logger import Logger

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Ordered-ingredient crafting session')
    parser.add_argument('--data-dir', '-d', type=str, default=DATA_DIR,
                        help='Directory holding CraftingRecipes.json, Items.json and StartingInventory.json')
    parser.add_argument('--script', '-s', type=str, default=None,
                        help='Read commands from this file instead of stdin')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--keep-items-on-fail', dest='return_items', action='store_const', const='true',
                       help='Return ingredients when no recipe matches')
    group.add_argument('--lose-items-on-fail', dest='return_items', action='store_const', const='false',
                       help='Ingredients are lost when no recipe matches')
    group.add_argument('--return-items', dest='return_items', type=str, metavar='{true,false}',
                       help='Plugin-style "Return Items" parameter; blank or unknown text keeps the default')
    parser.add_argument('--log-level', type=str, default=LOG_LEVEL,
                        help='DEBUG, INFO, WARNING, ERROR or CRITICAL (default: %(default)s)')
    parser.add_argument('--raw', action='store_true',
                        help='Keep [[COLOR]] format codes in the output')
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    Logger.set_level(args.log_level)

    return_items = parse_bool_param(args.return_items, default=RETURN_ITEMS_ON_FAIL)
    game = GameManager.from_data_dir(args.data_dir, return_items_on_fail=return_items)

    if args.script:
        try:
            with open(args.script, 'r', encoding='utf-8') as f:
                game.run(f, sys.stdout, strip_format=not args.raw)
        except OSError as e:
            Logger.error("main", f"Cannot read script '{args.script}': {e}")
            return 1
    else:
        game.run(sys.stdin, sys.stdout, strip_format=not args.raw)
    return 0

if __name__ == "__main__":
    sys.exit(main())
