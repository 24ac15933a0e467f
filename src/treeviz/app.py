"""Streamlit UI for treeviz."""

from __future__ import annotations

import streamlit as st

from treeviz.indent_parser import parse_lines
from treeviz.tree_builder import tree_from_lines
from treeviz.tree_renderer import render_tree

_PREVIEW_MAX_LINES = 1000

_PLACEHOLDER = "src\n  main.py\n  utils.py\nREADME.md"


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def main() -> None:
    st.set_page_config(
        page_title="treeviz",
        page_icon="🌳",
        layout="wide",
    )

    # Hide Streamlit's default toolbar (Deploy, Stop, etc.)
    st.markdown(
        "<style>[data-testid='stToolbar'] { display: none; }</style>",
        unsafe_allow_html=True,
    )

    st.title("treeviz")
    st.caption(
        "Paste indented text (tabs, or two spaces per level) to draw it as a tree."
    )

    text = st.text_area(
        "Indented text",
        value=_qp("text"),
        placeholder=_PLACEHOLDER,
        height=300,
    )

    lines = parse_lines(text)
    root = tree_from_lines(lines)
    diagram = render_tree(root)

    st.info(f"{len(lines)} lines, {root.count()} nodes.")
    _show_result(diagram)


def _show_result(diagram: str) -> None:
    """Display download button and preview for a rendered diagram."""
    st.download_button(
        label="Download tree",
        data=diagram + "\n",
        file_name="tree.txt",
        mime="text/plain",
    )

    preview_lines = diagram.split("\n")
    with st.expander("Preview", expanded=True):
        if len(preview_lines) > _PREVIEW_MAX_LINES:
            truncated = "\n".join(preview_lines[:_PREVIEW_MAX_LINES])
            st.code(truncated, language="text")
            st.caption(
                f"Preview is truncated to {_PREVIEW_MAX_LINES:,} lines "
                f"(total {len(preview_lines):,} lines). "
                "Download the file for the full diagram."
            )
        else:
            st.code(diagram, language="text")


if __name__ == "__main__":
    main()
