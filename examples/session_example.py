"""Example of driving region highlights from editor events.

A real integration implements EditorHost on top of the editor's API; this
example uses the in-memory host and prints the resulting line styles.

Usage:
    python examples/session_example.py
"""

from code_regions import HighlightConfig, MemoryHost, Region, get_painter, setup

BUFFER = 1

SOURCE = """\
# region setup
import os
# region helpers
def helper():
    return os.getcwd()
# endregion
# endregion
"""


def on_buffer_changed(regions: list[Region]) -> None:
    """Repaint every region after the region detector has run."""
    get_painter().refresh(BUFFER, regions)


def on_colorscheme_changed() -> None:
    """Forget styles derived from the previous background."""
    get_painter().theme_changed()


def main() -> None:
    host = MemoryHost(background="dark")
    host.set_user_style("Normal", "#1e1e2e")
    lines = SOURCE.splitlines()
    host.add_buffer(BUFFER, len(lines))

    setup(host, HighlightConfig())
    on_buffer_changed([Region(1, 7, 1), Region(3, 6, 2)])

    for style, text in zip(host.line_styles(BUFFER), lines, strict=True):
        print(f"{style or '':<14} {text}")

    host.set_user_style("Normal", "#eff1f5")
    on_colorscheme_changed()
    on_buffer_changed([Region(1, 7, 1), Region(3, 6, 2)])
    print({name: attrs.get("background") for name, attrs in host.styles.items()})


if __name__ == "__main__":
    main()
