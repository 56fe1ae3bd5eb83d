"""Cat animation shown next to the project list."""

from typing import Sequence

# One full cycle: idle, blink, shuffle left/right, then a paw wave.
CAT_FRAMES: tuple[str, ...] = (
    "\n"
    "   /\\_/\\\n"
    "  ( o.o )\n"
    "   > ^ <\n",
    "\n"
    "   /\\_/\\\n"
    "  ( -.- )\n"
    "   > ^ <\n",
    "\n"
    "   /\\_/\\\n"
    "  ( o.o )\n"
    "   > ^ <\n",
    "\n"
    "    /\\_/\\\n"
    "   ( o.o )\n"
    "    > ^ <\n",
    "\n"
    "  /\\_/\\\n"
    " ( o.o )\n"
    "  > ^ <\n",
    "\n"
    "   /\\_/\\\n"
    "  ( o.o )\n"
    "   > ^ <\n"
    "   oo\n",
    "\n"
    "   /\\_/\\\n"
    "  ( -.- )\n"
    "   > p <\n"
    "   oo\n",
    "\n"
    "   /\\_/\\\n"
    "  ( o.o )\n"
    "   > p <\n"
    "   oo\n",
)


def frame_for(frames: Sequence[str], counter: int) -> str:
    """Pick the frame to show for a tick counter.

    Raises:
        ValueError: If ``frames`` is empty.
    """
    if not frames:
        raise ValueError("frame table is empty")
    return frames[counter % len(frames)]
