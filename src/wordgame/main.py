"""CLI entrypoint for the terminal word game."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable

from . import display
from .errors import GameOverError, ValidationError, WordListError
from .evaluator import normalize_word
from .models import WORD_LENGTH, LetterOutcome
from .session import GameSession
from .words import WordList, load_words, load_words_from_file

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
QUIT_COMMANDS = {"quit", "exit", ":q"}
YES_ANSWERS = {"y", "yes", "1", "true"}
NO_ANSWERS = {"n", "no", "0", "false"}
RULE = "=" * 50


class QuitApp(Exception):
    """Signal immediate exit from the guess or replay prompts."""


def run(argv: list[str] | None = None) -> int:
    """Run the CLI application."""
    parser = argparse.ArgumentParser(prog="wordgame", description="Guess the five-letter word")
    parser.add_argument("command", nargs="?", default="play", choices=["play"])
    parser.add_argument("--words", metavar="PATH", help="word list file, one word per line")
    parser.add_argument("--target", metavar="WORD", help="play against a fixed target word")
    parser.add_argument("--seed", type=int, help="seed for reproducible target selection")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    args = parser.parse_args(argv)

    color = not args.no_color and display.color_supported()
    try:
        words = load_words_from_file(args.words) if args.words else load_words()
    except WordListError as exc:
        print(display.error(f"Failed to initialize game: {exc}", color))
        return 1

    target: str | None = None
    if args.target is not None:
        try:
            target = normalize_word(args.target, "target")
        except ValidationError as exc:
            print(display.error(str(exc), color))
            return 2

    rng = random.Random(args.seed)
    return play_shell(words, target=target, rng=rng, color=color)


def play_shell(
    words: WordList,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
    *,
    target: str | None = None,
    rng: random.Random | None = None,
    color: bool = False,
) -> int:
    """Play games until the player declines a rematch or quits.

    An invalid ``target`` raises ``ValidationError`` before anything is shown.
    """
    if target is not None:
        target = normalize_word(target, "target")
    _welcome(print_fn, color)
    try:
        while True:
            session = GameSession(target or words.random_word(rng))
            _play_game(session, words, input_fn, print_fn, color)
            if not _ask_play_again(input_fn, print_fn, color):
                break
    except QuitApp:
        print_fn(display.info("Game terminated by user.", color))
        return 0
    _goodbye(print_fn, color)
    return 0


def _read(input_fn: InputFn, prompt: str) -> str:
    try:
        return input_fn(prompt)
    except EOFError as exc:
        raise QuitApp() from exc


def _welcome(print_fn: PrintFn, color: bool) -> None:
    print_fn("")
    print_fn(display.title("WELCOME TO WORDGAME!", color))
    print_fn("")
    print_fn(display.info("GAME RULES:", color))
    print_fn(f"- You have a limited number of attempts to guess a {WORD_LENGTH}-letter word")
    print_fn("- Enter your guess and press Enter (type 'quit' to leave)")
    print_fn("- After each guess, letters are marked:")
    legend = (("G", LetterOutcome.CORRECT), ("Y", LetterOutcome.WRONG_POSITION), ("R", LetterOutcome.INCORRECT))
    for letter, outcome in legend:
        print_fn(f"  {display.format_letter(letter, outcome, color)} = {outcome.description}")
    print_fn("")
    print_fn(display.warning("If you guess more of a letter than the word contains,", color))
    print_fn(display.warning("the extra copies are marked as not in the word.", color))
    print_fn("")


def _play_game(session: GameSession, words: WordList, input_fn: InputFn, print_fn: PrintFn, color: bool) -> None:
    """Run one session to completion."""
    print_fn(display.success("NEW GAME STARTED!", color))
    print_fn(display.info(f"Target word chosen from {len(words)} available words.", color))
    print_fn("")
    while not session.is_over():
        _show_state(session, print_fn, color)
        if not _process_guess(session, words, input_fn, print_fn, color):
            break
    _show_outcome(session, print_fn, color)


def _show_state(session: GameSession, print_fn: PrintFn, color: bool) -> None:
    print_fn(display.info(f"Attempt {session.attempts + 1} of {session.max_attempts}:", color))
    _show_history(session, print_fn, color)
    if session.attempts:
        print_fn("")


def _show_history(session: GameSession, print_fn: PrintFn, color: bool) -> None:
    for index in range(session.attempts):
        guess, result = session.entry(index)
        print_fn(f"{index + 1}. {display.format_guess(guess, result, color)}")


def _process_guess(
    session: GameSession, words: WordList, input_fn: InputFn, print_fn: PrintFn, color: bool
) -> bool:
    """Prompt until one guess is accepted; return ``False`` if the session refused it."""
    while True:
        user_input = _read(input_fn, "Enter your guess: ").strip()
        if not user_input:
            print_fn(display.warning(f"Please enter a {WORD_LENGTH}-letter word.", color))
            continue
        if user_input.lower() in QUIT_COMMANDS:
            raise QuitApp()

        try:
            result = session.submit_guess(user_input)
        except ValidationError as exc:
            print_fn(display.error(str(exc), color))
            print_fn(display.info(f"Please enter exactly {WORD_LENGTH} letters (A-Z only).", color))
            continue
        except GameOverError as exc:
            print_fn(display.error(str(exc), color))
            return False

        # Format-valid words outside the list are still accepted.
        if not words.contains(user_input):
            print_fn(display.warning("Word not in dictionary, but allowed as per game rules.", color))
        print_fn(display.format_guess(user_input.upper(), result, color))
        print_fn("")
        return True


def _show_outcome(session: GameSession, print_fn: PrintFn, color: bool) -> None:
    print_fn(RULE)
    if session.is_won():
        print_fn(display.success("CONGRATULATIONS! YOU WON!", color))
        noun = "attempt" if session.attempts == 1 else "attempts"
        print_fn(display.success(f"You guessed the word '{session.target}' in {session.attempts} {noun}!", color))
    else:
        print_fn(display.error("GAME OVER!", color))
        print_fn(display.info(f"The word was: {session.target}", color))
        print_fn(display.info("Better luck next time!", color))
    print_fn("")
    print_fn(display.title("GAME SUMMARY", color))
    print_fn(session.summary().describe())
    print_fn("\nYour guesses:")
    _show_history(session, print_fn, color)
    print_fn(RULE)


def _ask_play_again(input_fn: InputFn, print_fn: PrintFn, color: bool) -> bool:
    while True:
        answer = _read(input_fn, "Would you like to play again? (y/n): ").strip().lower()
        if answer in YES_ANSWERS:
            return True
        if answer in NO_ANSWERS:
            return False
        print_fn(display.warning("Please enter 'y' for yes or 'n' for no.", color))


def _goodbye(print_fn: PrintFn, color: bool) -> None:
    print_fn("")
    print_fn(display.title("Thanks for playing!", color))
    print_fn(display.info("Come back soon for more word puzzles!", color))
    print_fn("")


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
