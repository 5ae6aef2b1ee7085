import customtkinter as ctk
from tkinter import messagebox

from scummer import __version__
from scummer.core.errors import ScummError, format_error_chain
from scummer.ui.theme import COLORS, FONTS, STYLES, configure_theme

NO_PROFILE_MESSAGE = "No save profile yet. Start a run in the game first."


def describe_profile_dir(core):
    """Text for the profile box: the profile dir, or why there isn't one"""
    try:
        if not core.find_profile_dirs():
            return NO_PROFILE_MESSAGE
        return core.select_profile_dir()
    except ScummError as e:
        return format_error_chain(e)


def scumm_for_window(core):
    """Scumm once and return (success, message) for a message box"""
    try:
        if not core.find_profile_dirs():
            return False, NO_PROFILE_MESSAGE
        scummed = core.scumm_current_profile()
    except ScummError as e:
        return False, format_error_chain(e)
    return True, f"{scummed.source_path}\n→ {scummed.dest_path}"


class ScummGUI(ctk.CTk):
    def __init__(self, core):
        super().__init__()
        configure_theme()
        self.title(f"Darkest Dungeon II Scummer v{__version__}")
        self.geometry("640x480")
        self.core = core
        self.configure(fg_color=COLORS["background"])
        self.create_widgets()
        self.update_profile_display()
        self.refresh_backup_list()

    def create_widgets(self):
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        top = ctk.CTkFrame(self, **STYLES["frame"])
        top.grid(row=0, column=0, sticky="ew", padx=10, pady=10)
        top.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(top, text="Profile Folder:",
                     font=FONTS["label"], text_color=COLORS["text"]).grid(row=0, column=0, sticky="w")
        self.profile_entry = ctk.CTkEntry(top, **STYLES["entry"])
        self.profile_entry.grid(row=1, column=0, sticky="ew", pady=5)

        buttons = ctk.CTkFrame(top, **STYLES["frame"])
        buttons.grid(row=2, column=0, sticky="ew")
        for text, cmd in [
            ("\U0001F56F️ Scumm Now", self.scumm_now),
            ("\U0001F501 Refresh", self.refresh),
        ]:
            ctk.CTkButton(
                buttons,
                text=text,
                command=cmd,
                **STYLES["button"],
                font=FONTS["button"]
            ).pack(side="left", padx=5, pady=4)

        self.backup_list_frame = ctk.CTkScrollableFrame(
            self,
            label_text="Scummed Snapshots",
            **STYLES["frame"],
            label_font=FONTS["body"]
        )
        self.backup_list_frame.grid(row=1, column=0, sticky="nsew", padx=10, pady=(0, 10))

    def refresh(self):
        self.update_profile_display()
        self.refresh_backup_list()

    def update_profile_display(self):
        text = describe_profile_dir(self.core)
        self.profile_entry.configure(state="normal")
        self.profile_entry.delete(0, "end")
        self.profile_entry.insert(0, text)
        self.profile_entry.configure(state="readonly")

    def refresh_backup_list(self):
        self.clear_backup_list()
        try:
            backups = self.core.get_backups()
        except ScummError as e:
            backups = []
            error_msg = format_error_chain(e)
        else:
            error_msg = "No snapshots yet"

        if not backups:
            ctk.CTkLabel(
                self.backup_list_frame,
                text=error_msg,
                text_color=COLORS["text"],
                font=FONTS["body"],
                wraplength=560
            ).pack(pady=10)
            return

        for idx, backup in enumerate(backups, 1):
            ctk.CTkLabel(
                self.backup_list_frame,
                text=f"{idx}. {backup['formatted_date']}    {backup['name']}",
                font=FONTS["label"],
                anchor="w",
                fg_color=COLORS["accent"] if idx == 1 else COLORS["surface"],
                text_color="#000000" if idx == 1 else COLORS["text"],
                corner_radius=6
            ).pack(fill="x", pady=3, padx=5)

    def clear_backup_list(self):
        for widget in self.backup_list_frame.winfo_children():
            widget.destroy()

    def scumm_now(self):
        # Runs on the UI thread; the window blocks until the copy finishes
        success, message = scumm_for_window(self.core)
        if success:
            messagebox.showinfo("Result", f"✅ Scummed!\n{message}")
        else:
            messagebox.showerror("Scumm Failed", f"❌ {message}")
        self.refresh()

    def run(self):
        self.mainloop()
