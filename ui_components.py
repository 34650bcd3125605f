"""
Small presentational helpers for the Streamlit page
"""
import html
import json

import streamlit.components.v1 as components

import config


def preview_text(entry, limit=None):
    """Single-line preview of a history entry, cut with an ellipsis"""
    if limit is None:
        limit = config.HISTORY_PREVIEW_CHARS
    if len(entry) <= limit:
        return entry
    return entry[:limit].rstrip() + "…"


def clipboard_button_html(text, label="📋 Copy", copied_label="Copied!", ack_ms=None):
    """
    Build the HTML for a copy-to-clipboard button

    The button writes `text` verbatim to the clipboard and shows
    `copied_label` for `ack_ms` milliseconds before switching back.
    """
    if ack_ms is None:
        ack_ms = config.COPY_ACK_MS
    # json.dumps gives a safe JS string literal; "</" is split so it can't close the script tag
    payload = json.dumps(text).replace("</", "<\\/")
    return f"""
    <button id="copy-btn" style="border-radius:10px; font-weight:600; padding:0.4em 1em;
            border:1px solid rgba(0,0,0,0.15); cursor:pointer;">{html.escape(label)}</button>
    <script>
    const btn = document.getElementById("copy-btn");
    btn.addEventListener("click", () => {{
        navigator.clipboard.writeText({payload}).then(() => {{
            btn.textContent = {json.dumps(copied_label)};
            setTimeout(() => {{ btn.textContent = {json.dumps(label)}; }}, {int(ack_ms)});
        }});
    }});
    </script>
    """


def clipboard_button(text):
    """Render the copy button; nothing is shown when there is no text"""
    if not text:
        return
    components.html(clipboard_button_html(text), height=50)
