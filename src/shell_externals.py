""" Registry of commands delegated to host executables. """

EXTERNALS = {}


def external(name):
    """Decorator to register externally delegated commands"""
    def wrapper(func):
        EXTERNALS[name] = func
        return func
    return wrapper


def looks_like_option(arg: str) -> bool:
    return arg.strip().startswith("-")


def build_ls_argv(args, state) -> list[str]:
    """
    Pass args through verbatim. When the last one is an option flag the
    current directory is appended as the path to list.
    """
    argv = ["ls"] + list(args)
    if args and looks_like_option(args[-1]):
        argv.append(state.current_directory)
    return argv


@external("ls")
def external_ls(args, state, process_runner):
    # cwd keeps "ls" and "ls relative/path" consistent with the shell's directory.
    return process_runner.run(build_ls_argv(args, state), cwd=state.current_directory)
