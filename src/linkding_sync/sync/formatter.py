"""Render a bookmark as the text block appended to the destination note."""

from linkding_sync.linkding.models import Bookmark


def heading_for(bookmark: Bookmark) -> str:
    title = bookmark.title or ""
    if title.strip():
        return title
    return bookmark.website_title or ""


def format_bookmark(bookmark: Bookmark) -> str:
    """Format one bookmark as a heading, a link, an optional description and tags.

    Every line ends with ``" \\n"``. The closing ``---`` separator always
    follows a blank line, whether or not a ``Tags:`` line is present.
    """
    url = bookmark.url or ""
    content = f"## {heading_for(bookmark)} \n"
    content += f"### [{url}]({url}) \n"

    description = (bookmark.description or "").strip()
    if description:
        content += f"{description} \n"

    if bookmark.tag_names:
        content += f"Tags: {' '.join(bookmark.tag_names)} \n\n--- \n"
    else:
        content += "\n--- \n"
    return content
