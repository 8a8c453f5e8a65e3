# -*- coding: utf-8 -*-
"""
Play the sliding-tile puzzle in the console.
"""
import logging

from slidegrid.envs import EntropyGrid, GameSession, TwentyFortyEight


def reset(session: GameSession):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    session: GameSession
        The game session
    """
    session.reset()
    session.render()


def step(session: GameSession, key: str):
    """
    Apply the move bound to a key.

    Parameters
    ----------
    session: GameSession
        The game session

    key: str
        Key name (arrow name, direction name or wasd)
    """
    result = session.handle_key(key)
    if result is None:
        return

    _, reward, terminated = result
    print(f"reward={reward}, score={session.score}")
    session.render()
    if terminated:
        print("terminated!")


def key_handler(session: GameSession, key: str) -> bool:
    """
    Handle the keyboard.

    Parameters
    ----------
    session: GameSession
        The game session

    key: str
        Key to handle

    Returns
    -------
    bool
        False once the player asked to quit.
    """
    if key in ("q", "escape"):
        return False

    if key in ("r", "backspace"):
        reset(session)
        return True

    step(session, key)
    return True


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--variant", help="Merge rule to play with", choices=["classic", "entropy"], default="classic")
    parser.add_argument("--size", help="Board size", required=False, type=int, default=None)
    parser.add_argument("--seed", required=False, type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    if args.variant == "entropy":
        game = EntropyGrid(size=args.size or 5, seed=args.seed)
    else:
        game = TwentyFortyEight(size=args.size or 4, seed=args.seed)
    game.render()

    # ##: Blocking input loop.
    while True:
        try:
            pressed = input("> ").strip()
        except EOFError:
            break
        if not key_handler(game, pressed):
            break
