import argparse
import sys

from loguru import logger

from ludo_lite import Board, GameSession, GameSnapshot, RandomDie, TokenState
from ludo_lite.config import config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pass-and-play Ludo in the terminal")
    parser.add_argument(
        "--players",
        type=int,
        default=config.NUM_PLAYERS,
        choices=range(2, config.MAX_PLAYERS + 1),
        help="Number of players (2-4)",
    )
    parser.add_argument(
        "--target",
        type=int,
        default=config.TOKENS_TO_WIN,
        choices=range(1, config.TOKENS_PER_PLAYER + 1),
        help="Finished tokens needed to win (1-4)",
    )
    parser.add_argument(
        "--names", nargs="*", default=None, help="Player names in seat order"
    )
    parser.add_argument("--seed", type=int, default=config.SEED, help="Dice seed")
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    return parser.parse_args()


def _token_label(state: TokenState, position) -> str:
    if state is TokenState.BASE:
        return "base"
    if state is TokenState.FINISHED:
        return "done"
    if state is TokenState.IN_HOME_COLUMN:
        return f"home {position}"
    return f"track {position}"


def render(snapshot: GameSnapshot) -> str:
    lines = []
    track = ["." for _ in range(config.TRACK_LENGTH)]
    for cell in config.SAFE_CELLS:
        track[cell] = "*"
    for player in snapshot.players:
        initial = player.name[:1].upper() or str(player.player_id)
        for token in player.tokens:
            if token.cell is not None:
                track[token.cell] = initial if track[token.cell] in ".*" else "+"
    lines.append("".join(track))
    for player in snapshot.players:
        marker = ">" if player.player_id == snapshot.active_player else " "
        tokens = ", ".join(
            f"{t.token_index}:{_token_label(t.state, t.position)}" for t in player.tokens
        )
        lines.append(
            f"{marker} {player.name:<8} finished {player.finished_count}/{snapshot.target}  [{tokens}]"
        )
    return "\n".join(lines)


def _ask(prompt: str) -> str:
    try:
        return input(prompt).strip().lower()
    except EOFError:
        return "q"


def main() -> None:
    args = parse_args()
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    session = GameSession(auto_pass=True, die=RandomDie(args.seed))
    snapshot = session.start_new_game(args.players, args.target, args.names)
    print("--- Ludo Lite ---")
    print(f"Safe cells (*): {sorted(config.SAFE_CELLS)}")
    print(f"Entry cells: {[Board.entry_cell(i) for i in range(args.players)]}")

    while not snapshot.is_over:
        print()
        print(render(snapshot))
        player = snapshot.players[snapshot.active_player]
        if _ask(f"{player.name}: press Enter to roll (q to quit) ") == "q":
            return
        update = session.roll(player.player_id)
        snapshot = update.snapshot
        if not update.success:
            print(update.error)
            continue
        print(f"{player.name} rolled {update.dice}")
        if update.passed:
            print("No legal move, turn passes.")
            continue

        movable = [mv.token_index for mv in session.game.legal_moves(player.player_id)]
        while True:
            choice = _ask(f"Move which token {movable}? ")
            if choice == "q":
                return
            if not choice.isdigit():
                print("Enter a token number.")
                continue
            update = session.select_token(player.player_id, int(choice))
            if update.success:
                break
            print(update.error)
        snapshot = update.snapshot
        for cap in update.captured:
            print(
                f"Captured {snapshot.players[cap.player_index].name} token {cap.token_index} on cell {cap.cell}!"
            )
        if update.finished:
            print(f"{player.name} brought a token home.")

    print()
    print(render(snapshot))
    print(f"\n{snapshot.players[snapshot.winner].name} wins!")


if __name__ == "__main__":
    main()
