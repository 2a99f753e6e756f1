"""Basic usage example for deskkit."""

from deskkit import format_hotkey, load_file, save_file, set_modified, split_path


def main():
    """Save a note through the save dialog, then open it again."""

    print(format_hotkey("^+s"))

    result = save_file("Remember the milk\n", suggested_name="note.txt",
                       file_filter="Text files (*.txt)")
    if result.error:
        print("Nothing saved")
        return

    parts = split_path(result.path)
    print(set_modified(f"{parts.file_name} - Notes", False))

    loaded = load_file(result.path)
    if not loaded.error:
        print(loaded.contents)


if __name__ == "__main__":
    main()
