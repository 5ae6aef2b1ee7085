import sys


def launch_gui():
    """Directly start the GUI"""
    try:
        from scummer.core.backup_manager import ScummBackupCore
        from scummer.ui.gui_interface import ScummGUI
    except ImportError as e:
        print(f"Error importing GUI components: {str(e)}")
        print("Please install manually with:")
        print("pip install customtkinter")
        sys.exit(1)

    core = ScummBackupCore()
    app = ScummGUI(core)
    app.run()


if __name__ == "__main__":
    launch_gui()
