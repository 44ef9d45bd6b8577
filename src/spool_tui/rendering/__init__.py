# =============================================================================
# Rendering Module
# =============================================================================
# Prepares messages for display. Nothing here draws on the terminal; it
# produces MessageView objects that the front ends paint.
#
#   - view: MessageView, header placeholders, date formatting, status line
#   - text: Body extraction (MIME best effort, HTML via inscriptis)
# =============================================================================

from spool_tui.rendering.text import TextRenderer, extract_body_text
from spool_tui.rendering.view import MessageView, render_message, status_line

__all__ = [
    "MessageView",
    "TextRenderer",
    "extract_body_text",
    "render_message",
    "status_line",
]
