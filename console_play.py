import logging

from backend.app.core.config import settings
from backend.app.engine.game import GameSession

def main():
    print("=======================================")
    print("   CONNECT FOUR: Human vs MCTS Solver")
    print("=======================================")

    logging.basicConfig(level=logging.WARNING)
    game = GameSession()

    while True:
        print(game.get_visual_board())
        if game.winner is not None:
            print("\nGame Over! You lost.")
            return
        if game.is_draw():
            print("\nGame Over! It's a Draw.")
            return

        # --- Human Turn (X) ---
        try:
            col = int(input(f"\nYour Move (Columns {game.get_valid_moves()}): "))
        except ValueError:
            print("Please enter a valid number.")
            continue
        if not game.can_play(col):
            print("Invalid column. Try again.")
            continue
        game.play_opponent(col)

        print("\n" + game.get_visual_board())
        if game.winner is not None:
            print("\nGame Over! You won.")
            return
        if game.is_draw():
            print("\nGame Over! It's a Draw.")
            return

        # --- AI Turn (O) ---
        print("\nAI is thinking...")
        column, summary = game.play_ai(settings.time_budget_ms)
        print(f"AI plays Column: {column}")
        print(f"AI stats: {summary}")

if __name__ == "__main__":
    main()
