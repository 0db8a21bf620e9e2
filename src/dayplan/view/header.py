# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from dayplan.view.theme import get_palette


def header(title: str, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        title: The main line, usually the open date
        sub_header: Optional sub-header text to display
    """
    palette = get_palette()
    print(Padding(f"[{palette['title']}]dayplan[/{palette['title']}]", (1, 0, 0, 1)))
    print(Padding(f"[{palette['accent']}]{title}[/{palette['accent']}]", (0, 1)))
    if sub_header is not None:
        print(Padding(f"[{palette['muted']}]{sub_header}[/{palette['muted']}]", (0, 1)))
