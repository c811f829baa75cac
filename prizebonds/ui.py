"""
Design (ui.py)
- Purpose: Build and manage the Tkinter UI (input box, search, Treeview, toasts, dialogs).
- Inputs: BondRepo (shared state).
- Outputs: None (renders UI, forwards user actions to BondController).
- Side effects: Creates windows; writes to the clipboard through the controller.
- Thread-safety: UI code runs on main thread only.
"""

import tkinter as tk
from tkinter import ttk, messagebox

from .clipboard import TkClipboard
from .config import APP_TITLE, BOND_DIGITS
from .controller import BondController
from .models import Severity
from .notifications import NotificationCenter
from .repository import BondRepo

BG = "#1e1e1e"
PANEL_BG = "#2b2b2b"
TOAST_COLORS = {
    Severity.SUCCESS: ("#1f3b2c", "#7CFC00"),
    Severity.WARNING: ("#3b331f", "#FFA500"),
    Severity.ERROR: ("#3b1f1f", "#FF6A6A"),
}


class AppUI:
    """
    Design (AppUI)
    - Purpose: Encapsulate all UI creation and behavior.
    - Public attributes:
        input_var (tk.StringVar): bond entry box contents
        search_var (tk.StringVar): search query; every change repaints the list
        enable_notifications (tk.BooleanVar): also forward toasts to the OS notification area
        controller (BondController): every button goes through it
    - Public methods:
        refresh_ui(): repaint list, counters and footer from the repository
        render_toasts(): repaint the toast stack from the notification centre
    """

    def __init__(self, root: tk.Tk, repo: BondRepo):
        self.root = root
        self.repo = repo

        # UI state variables
        self.input_var = tk.StringVar()
        self.search_var = tk.StringVar()
        self.enable_notifications = tk.BooleanVar(value=False)

        self.notifier = NotificationCenter(root, on_change=self.render_toasts)
        self.controller = BondController(repo, self.notifier, TkClipboard(root))

        # Window
        self.root.title(APP_TITLE)
        self.root.rowconfigure(2, weight=1)
        self.root.columnconfigure(0, weight=1)
        self.root.configure(bg=BG)

        # Style
        style = ttk.Style(self.root)
        style.theme_use("default")
        style.configure(
            "Treeview",
            background=PANEL_BG,
            foreground="#f0f0f0",
            fieldbackground=PANEL_BG,
            rowheight=24,
            font=("Consolas", 11),
        )
        style.configure(
            "Treeview.Heading",
            background=BG,
            foreground="#ffffff",
            font=("Segoe UI", 10, "bold"),
        )
        style.map("Treeview", background=[("selected", "#444")], foreground=[])

        # ---- Add bonds row ----
        add_frame = tk.Frame(self.root, bg=BG)
        add_frame.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 5))
        add_frame.columnconfigure(0, weight=1)

        self.input_entry = tk.Entry(add_frame, textvariable=self.input_var, font=("Consolas", 12))
        self.input_entry.grid(row=0, column=0, sticky="ew", padx=(0, 5))
        self.input_entry.bind("<Return>", lambda _e: self.save_input())
        ttk.Button(add_frame, text="×", width=2, command=self.clear_input).grid(row=0, column=1, padx=(0, 5))
        ttk.Button(add_frame, text="Save", command=self.save_input).grid(row=0, column=2)
        tk.Label(
            add_frame,
            text=f"Single: 1234567 (exact {BOND_DIGITS} digits)    Range: 0000001-0000100    "
                 "Separate entries with commas, spaces or new lines.",
            fg="gray",
            bg=BG,
            font=("Segoe UI", 8),
        ).grid(row=1, column=0, columnspan=3, sticky="w", pady=(2, 0))

        # ---- Stats + search row ----
        bar = tk.Frame(self.root, bg=BG)
        bar.grid(row=1, column=0, sticky="ew", padx=10, pady=5)
        bar.columnconfigure(5, weight=1)

        self.stored_label = tk.Label(bar, text="Stored: 0", fg="#7CFC00", bg=BG, font=("Segoe UI", 10, "bold"))
        self.stored_label.grid(row=0, column=0, padx=(0, 15))
        # Valuation is not computed; fixed placeholder
        tk.Label(bar, text="Est. Value: --", fg="#9fa8ff", bg=BG, font=("Segoe UI", 10, "bold")).grid(
            row=0, column=1, padx=(0, 15)
        )
        tk.Label(bar, text="Search", fg="white", bg=BG).grid(row=0, column=2, padx=(0, 5))
        search_entry = tk.Entry(bar, textvariable=self.search_var)
        search_entry.grid(row=0, column=3, padx=(0, 5))
        ttk.Button(bar, text="×", width=2, command=lambda: self.search_var.set("")).grid(row=0, column=4)
        self.search_var.trace_add("write", lambda *_: self.refresh_ui())

        ttk.Button(bar, text="Copy All", command=self.copy_all).grid(row=0, column=6, padx=5)
        ttk.Button(bar, text="Clear All", command=self.clear_all).grid(row=0, column=7)

        # ---- Treeview ----
        list_frame = tk.Frame(self.root, bg=BG)
        list_frame.grid(row=2, column=0, sticky="nsew", padx=10, pady=5)
        list_frame.rowconfigure(0, weight=1)
        list_frame.columnconfigure(0, weight=1)

        self.columns = ("index", "bond")
        self.tree = ttk.Treeview(list_frame, columns=self.columns, show="headings", selectmode="browse")
        self.tree.heading("index", text="#")
        self.tree.heading("bond", text="Bond")
        self.tree.column("index", width=60, anchor="e", stretch=False)
        self.tree.column("bond", width=200, anchor="w")
        self.tree.grid(row=0, column=0, sticky="nsew")
        scroll = ttk.Scrollbar(list_frame, orient=tk.VERTICAL, command=self.tree.yview)
        scroll.grid(row=0, column=1, sticky="ns")
        self.tree.configure(yscrollcommand=scroll.set)

        # Bindings
        self.tree.bind("<Double-1>", lambda _e: self.copy_selected())
        self.tree.bind("<Delete>", lambda _e: self.delete_selected())

        # ---- Buttons & toggles ----
        button_frame = tk.Frame(self.root, bg=BG)
        button_frame.grid(row=3, column=0, sticky="ew", padx=10, pady=(0, 5))

        ttk.Button(button_frame, text="Copy", command=self.copy_selected).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Delete", command=self.delete_selected).pack(side=tk.LEFT, padx=5)
        tk.Checkbutton(
            button_frame,
            text="Enable System Notifications",
            variable=self.enable_notifications,
            fg="white",
            bg=BG,
            selectcolor=PANEL_BG,
            activebackground=BG,
            activeforeground="white",
            command=self.toggle_system_notifications,
        ).pack(side=tk.LEFT, padx=5)
        self.footer_label = tk.Label(button_frame, text="", fg="gray", bg=BG)
        self.footer_label.pack(side=tk.RIGHT, padx=5)

        # ---- Toast stack ----
        self.toast_frame = tk.Frame(self.root, bg=BG)
        self.toast_frame.grid(row=4, column=0, sticky="ew", padx=10, pady=(0, 10))

        # Initial paint
        self.refresh_ui()
        self.input_entry.focus_set()

    # ---------- Rendering ----------

    def refresh_ui(self) -> None:
        """
        Purpose: Rebuild the Tree rows from the filtered repository view.
        Side effects: Mutates Treeview items and labels (UI only).
        """
        visible = self.controller.visible(self.search_var.get())
        total = self.controller.count

        self.tree.delete(*self.tree.get_children())
        for i, bond in enumerate(visible, start=1):
            # iid = bond keeps selection lookups trivial (bonds are unique)
            self.tree.insert("", "end", iid=bond, values=(i, bond))

        self.stored_label.configure(text=f"Stored: {total:,}")
        self.footer_label.configure(text=f"Showing {len(visible)} of {total} records")

    def render_toasts(self) -> None:
        """Repaint one row per live notification, each with its own dismiss button."""
        for child in self.toast_frame.winfo_children():
            child.destroy()
        for n in self.notifier.active():
            bg, fg = TOAST_COLORS[n.severity]
            row = tk.Frame(self.toast_frame, bg=bg)
            row.pack(fill=tk.X, pady=2)
            tk.Label(row, text=n.message, fg=fg, bg=bg, anchor="w", font=("Segoe UI", 10)).pack(
                side=tk.LEFT, fill=tk.X, expand=True, padx=8, pady=4
            )
            tk.Button(
                row,
                text="×",
                fg=fg,
                bg=bg,
                relief=tk.FLAT,
                command=lambda nid=n.id: self.notifier.dismiss(nid),
            ).pack(side=tk.RIGHT, padx=4)

    # ---------- UI callbacks ----------

    def save_input(self) -> None:
        if self.controller.submit(self.input_var.get()):
            self.input_var.set("")
        self.refresh_ui()
        self.input_entry.focus_set()

    def clear_input(self) -> None:
        self.input_var.set("")
        self.input_entry.focus_set()

    def _selected_bond(self) -> str | None:
        selected = self.tree.selection()
        if not selected:
            messagebox.showinfo(APP_TITLE, "Select a bond first.")
            return None
        return selected[0]

    def copy_selected(self) -> None:
        bond = self._selected_bond()
        if bond:
            self.controller.copy_bond(bond)

    def delete_selected(self) -> None:
        bond = self._selected_bond()
        if bond:
            self.controller.delete(bond)
            self.refresh_ui()

    def copy_all(self) -> None:
        self.controller.copy_visible(self.search_var.get())

    def clear_all(self) -> None:
        """
        Purpose: Remove all bonds after user confirmation.
        Side effects: Mutates Repo (persisted) only on "Yes".
        """

        def confirm(count: int) -> bool:
            return messagebox.askyesno(
                "Clear Database?",
                f"You are about to delete {count} saved bonds.\nThis action cannot be undone.",
            )

        if self.controller.clear_all(confirm):
            self.refresh_ui()

    def toggle_system_notifications(self) -> None:
        self.notifier.system_notify = self.enable_notifications.get()
