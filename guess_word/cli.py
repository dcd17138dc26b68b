"""
Terminal Game

Plays one game on stdin/stdout. Markers under each guess:
``^`` right place, ``~`` in the word, ``.`` not in the word.
"""

import argparse
import random
import sys
from typing import Optional, TextIO

from .config.game_settings import MAX_ROUNDS, WORD_LENGTH
from .models.game import GameStatus, GuessResult, HitAccuracy, WordGuess, describe_guess_result
from .services.dictionary import Dictionary
from .services.game import Game

MARKERS = {
    HitAccuracy.IN_RIGHT_PLACE: '^',
    HitAccuracy.IN_WORD: '~',
    HitAccuracy.NOT_IN_WORD: '.',
}


def format_guess(word_guess: WordGuess) -> str:
    """Two-line plain text rendering of a scored guess."""
    letters = ' '.join(gl.letter.upper() for gl in word_guess)
    markers = ' '.join(MARKERS[gl.accuracy] for gl in word_guess)
    return f"{letters}\n{markers}"


def play(game: Game, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> GameStatus:
    """
    Run the read/print loop until the game ends or input runs out.

    Returns:
        GameStatus: The status when the loop stopped
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    print(f"Guess the {game.word_length}-letter word. You have {game.max_rounds} tries.", file=stdout)

    for line in stdin:
        status, result = game.guess(line.strip().lower())

        if result is GuessResult.VALID:
            print(format_guess(game.guess_history()[-1]), file=stdout)
        else:
            print(describe_guess_result(result, game.word_length), file=stdout)

        if status is GameStatus.WON:
            print(f"You win! Solved in {len(game.guess_history())} guesses.", file=stdout)
            break
        if status is GameStatus.LOST:
            print(f"Out of guesses. The word was {game.answer().upper()}.", file=stdout)
            break
        if result is GuessResult.VALID:
            print(f"{game.attempts_left} tries left.", file=stdout)

    return game.status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='guess-word', description="Play a word guessing game in the terminal.")
    parser.add_argument('--word-list', default=None,
                        help="newline-delimited word list (defaults to the bundled list)")
    parser.add_argument('--word-length', type=int, default=WORD_LENGTH,
                        help=f"letters per word (default: {WORD_LENGTH})")
    parser.add_argument('--max-rounds', type=int, default=MAX_ROUNDS,
                        help=f"number of guesses allowed (default: {MAX_ROUNDS})")
    parser.add_argument('--seed', type=int, default=None,
                        help="seed for picking the answer")
    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        dictionary = Dictionary.from_file(args.word_list, args.word_length)
        rng = random.Random(args.seed) if args.seed is not None else None
        game = Game(dictionary, max_rounds=args.max_rounds, rng=rng)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    status = play(game)
    return 0 if status is GameStatus.WON else 1


if __name__ == '__main__':
    sys.exit(main())
