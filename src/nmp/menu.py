"""
NMP Menu: numbered text menu with nested single-shot submenus.

    Numeric Matrix Processor
    1. Add matrices
    ...
    0. Exit
    Your choice:
"""


class Menu:
    """
    Numbered list of actions, run in a loop until the user picks 0.

    Parameters
    ----------
    title : str
        Heading shown above the items.

    Examples
    --------
    >>> menu = (Menu("Main")
    ...         .add("Say hi", lambda: print("hi"))
    ...         .add("More", Menu("More").one_time().add("Bye", lambda: None)))
    >>> menu.run(console)
    """

    def __init__(self, title):
        self.title = title
        self.items = []
        self.single_shot = False

    def add(self, label, action):
        """Append an item; `action` is a callable or a nested Menu."""
        self.items.append((label, action))
        return self

    def one_time(self):
        """Return to the parent after a single action."""
        self.single_shot = True
        return self

    def run(self, console):
        """
        Display, read a choice, dispatch; repeat.

        Stops on 0, after one action for a one-time menu, or at end of
        input (EOFError propagates to the caller).
        """
        while True:
            self._display(console)
            try:
                choice = console.read_int()
            except ValueError as exc:
                console.write(f"Invalid choice: {exc}")
                console.discard_pending()
                continue
            if choice == 0:
                return
            if not 1 <= choice <= len(self.items):
                console.write(f"Unknown option: {choice}")
                continue
            _, action = self.items[choice - 1]
            if isinstance(action, Menu):
                action.run(console)
            else:
                action()
            if self.single_shot:
                return

    def _display(self, console):
        console.write(self.title)
        for n, (label, _) in enumerate(self.items, start=1):
            console.write(f"{n}. {label}")
        console.write("0. Back" if self.single_shot else "0. Exit")
        console.write("Your choice: ", end="")
