""" Lexical analysis for shell commands. """


def tokenize(line: str) -> list[str]:
    # No quoting: a token is any run of non-whitespace characters.
    return line.split()
