"""Entry point for `python -m ticket_bot`."""

from ticket_bot.main import run

if __name__ == "__main__":
    run()
