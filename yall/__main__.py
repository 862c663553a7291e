import logging

from yall.config import get_log_level
from yall.interpreter import Interpreter
from yall.repl import repl


def main():
    logging.basicConfig(level=get_log_level())
    repl(Interpreter())


if __name__ == "__main__":
    main()
