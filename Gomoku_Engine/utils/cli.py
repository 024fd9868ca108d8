"""CLI options for the board size, play mode, automated player, and config path."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku (free-style five in a row)")
    parser.add_argument("--board-size", type=int, help="Board size (at least 5)")
    parser.add_argument(
        "--mode",
        choices=["human-vs-human", "human-vs-ai"],
        default=None,
        help="Play mode (asked interactively when omitted)",
    )
    parser.add_argument(
        "--difficulty",
        choices=["easy", "medium", "hard"],
        default=None,
        help="Automated player strength in human-vs-ai mode",
    )
    parser.add_argument(
        "--automated-player",
        choices=["black", "white"],
        default=None,
        help="Which color the computer plays (default from settings)",
    )
    parser.add_argument("--ai-delay", type=float, default=None, help="Seconds the computer 'thinks' before moving")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the automated player's random choices")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    return parser.parse_args(argv)
