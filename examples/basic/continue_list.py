"""Continue a markdown list in 3 lines, with no config and no deps."""

from listo import Gesture, classify, transform

item = classify("1. First item")
directive = transform(Gesture.CONFIRM, item, "  ", 1)
print(directive)
