"""Drive an in-memory buffer the way an editor would: one gesture per keypress."""

from listo import Gesture, LineBuffer, ListConfig, Mode, handle_gesture

config = ListConfig.from_dict({"list_markers": ["-", "*"], "filetypes": ["markdown"]})
buf = LineBuffer(["Groceries:"], cursor=(1, 10), mode=Mode.INSERT)

# Enter after a colon opens a nested list
handle_gesture(buf, Gesture.CONFIRM, config=config, filetype="markdown")
buf.set_line(2, "  - milk")
buf.cursor = (2, len("  - milk"))

# Enter on an item continues it, Enter on the empty item steps back out
handle_gesture(buf, Gesture.CONFIRM, config=config, filetype="markdown")
handle_gesture(buf, Gesture.CONFIRM, config=config, filetype="markdown")

print(buf.text)
print("cursor:", buf.cursor)
