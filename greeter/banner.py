import cowsay

MAX_TEXT_LENGTH = 4096


def bubble(text):
    """Frame ``text`` in a speech bubble, one bubble line per text line.

    Lines are kept whole and unstripped; the bubble grows to the widest one.
    """
    lines = text.split("\n")
    width = max(len(line) for line in lines)

    output = ["  " + "_" * width]
    if len(lines) > 1:
        output.append(" /" + " " * width + "\\")
    for line in lines:
        output.append("| " + line.ljust(width) + " |")
    if len(lines) > 1:
        output.append(" \\" + " " * width + "/")
    output.append("  " + "=" * width)
    return output, width


def render(text):
    """Return the cow saying ``text``, truncated to MAX_TEXT_LENGTH characters.

    Empty and blank text render as an empty bubble.
    """
    output, width = bubble(str(text)[:MAX_TEXT_LENGTH])
    for line in cowsay.CHARS["cow"].split("\n"):
        if line:
            output.append(" " * width + line)
    return "\n".join(output)
