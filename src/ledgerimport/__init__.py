"""Bank statement import with keyword rules, duplicate review and undoable imports."""

__version__ = "0.1.0"


def __getattr__(name):
    # cli.main is imported on first use
    if name == "main":
        from ledgerimport.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
