# theme.py - Darkest Dungeon flavoured palette

import customtkinter as ctk

# ======== Color Palette ========
COLORS = {
    "primary": "#8b1e1e",      # Blood red
    "secondary": "#5e1414",    # Darker red for hover
    "accent": "#c9a227",       # Torchlight gold for the newest snapshot
    "text": "#E8E0D0",         # Parchment
    "background": "#141210",   # Near-black
    "surface": "#2b2723"       # Dark stone
}

# ======== Typography ========
FONTS = {
    "body": ("Georgia", 14),
    "button": ("Georgia", 14, "bold"),
    "label": ("Georgia", 12)
}

# ======== Component Styles ========
STYLES = {
    "button": {
        "fg_color": COLORS["primary"],
        "hover_color": COLORS["secondary"],
        "text_color": COLORS["text"],
        "corner_radius": 8
    },
    "frame": {
        "fg_color": COLORS["background"],
        "border_width": 0
    },
    "entry": {
        "fg_color": COLORS["surface"],
        "text_color": COLORS["text"],
        "border_color": COLORS["primary"],
        "border_width": 1,
        "corner_radius": 6
    }
}


def configure_theme():
    ctk.set_appearance_mode("Dark")
    ctk.set_default_color_theme("dark-blue")
