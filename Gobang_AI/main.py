"""Entry point for Gobang matches and one-shot move suggestions. Load config, wire players, start Gobanggame."""

import sys
from pathlib import Path

import yaml

from Gobang_AI.Board import BLACK, WHITE, Board
from Gobang_AI.Gobanggame import DRAW, Gobanggame
from Gobang_AI.Player import ComputerPlayer, HumanPlayer
from Gobang_AI.ai import heuristic, presets, search_minimax
from Gobang_AI.engine import referee
from Gobang_AI.engine.renju_rules import ForbiddenRules
from Gobang_AI.utils.cli import parse_args
from Gobang_AI.utils.logger import configure_logging, log_event


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Gobang_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


def build_player(kind, color, preset_name, preset_table, rules, weights, seed):
    if kind == "human":
        return HumanPlayer(color)
    options = presets.get_preset(preset_name, preset_table)
    if seed is not None:
        options = options.with_seed(seed)
    return ComputerPlayer(color, options=options, rules=rules, weights=weights)


def suggest(path, color_name, preset_names, preset_table, rules, weights, seed):
    with open(path, "r", encoding="utf-8") as f:
        board = Board.from_text(f.read())
    if color_name is None:
        color = referee.infer_color_to_move(board)
    else:
        color = BLACK if color_name == "black" else WHITE
    options = presets.get_preset(preset_names[color], preset_table)
    if seed is not None:
        options = options.with_seed(seed)
    move = search_minimax.choose_move(board, color, options=options, rules=rules, weights=weights)
    if move is None:
        print("No legal move")
        return 1
    print(f"{move[0]} {move[1]}")
    return 0


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    settings = load_settings(args.settings)

    board_size = args.board_size or settings.get("board_size", 19)
    mode = args.mode or settings.get("mode", "computer-vs-computer")
    black_preset = args.black_preset or settings.get("black_preset", "medium")
    white_preset = args.white_preset or settings.get("white_preset", "medium")
    rule_names = args.rules if args.rules is not None else settings.get("forbidden_rules", [])
    rules = ForbiddenRules.from_names(rule_names or [])

    settings_path = resolve_project_path(args.settings)
    preset_table = presets.load_presets(settings_path)
    weights = heuristic.load_weights(settings_path)

    if args.suggest:
        preset_names = {BLACK: black_preset, WHITE: white_preset}
        return suggest(args.suggest, args.color, preset_names, preset_table, rules, weights, args.seed)

    black_kind, white_kind = mode.split("-vs-")
    black = build_player(black_kind, BLACK, black_preset, preset_table, rules, weights, args.seed)
    white = build_player(white_kind, WHITE, white_preset, preset_table, rules, weights, args.seed)

    game = Gobanggame(
        black_player=black,
        white_player=white,
        board_size=board_size,
        rules=rules,
        logger=log_event,
    )
    result = game.play()
    print(game.board.render())
    outcome = {BLACK: "Black wins", WHITE: "White wins", DRAW: "Draw"}
    print(outcome.get(result, "Unknown result"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
