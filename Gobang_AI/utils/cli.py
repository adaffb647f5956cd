"""CLI options for selecting players, presets, Renju rules, and config paths."""

MODES = ["computer-vs-computer", "human-vs-computer", "computer-vs-human", "human-vs-human"]
RULE_NAMES = ["overline", "double-four", "double-three"]


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gobang engine (five-in-a-row, optional Renju fouls)")
    parser.add_argument("--board-size", type=int, help="Board size (default from settings, 19)")
    parser.add_argument("--mode", choices=MODES, help="Play mode (who plays black/white)")
    parser.add_argument("--black-preset", help="Search preset for a computer Black (easy, medium, hard, ...)")
    parser.add_argument("--white-preset", help="Search preset for a computer White")
    parser.add_argument(
        "--rules",
        nargs="*",
        choices=RULE_NAMES,
        default=None,
        help="Forbidden-move rules for Black; pass the flag with no names to disable all",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for randomized presets")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--suggest", metavar="BOARD_FILE", help="Print the selected move for a board text file and exit")
    parser.add_argument("--color", choices=["black", "white"], help="Side to move for --suggest (default: inferred)")
    parser.add_argument("--verbose", action="store_true", help="Log search decisions")
    return parser.parse_args(argv)
