PROMPT = "minish> "
EXIT_KEYWORD = "exit"
FAREWELL = "exiting..."
HOME_SHORTCUT = "~"
TEXT_ENCODING = "utf-8"
