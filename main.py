import logging
import os
import tkinter as tk

from prizebonds.config import LOG_LEVEL_ENV
from prizebonds.repository import BondRepo
from prizebonds.storage import JsonFileStore, get_state_path
from prizebonds.ui import AppUI


def main() -> None:
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    repo = BondRepo(JsonFileStore(get_state_path()))
    repo.hydrate()

    root = tk.Tk()
    AppUI(root, repo)
    root.mainloop()


if __name__ == "__main__":
    main()
