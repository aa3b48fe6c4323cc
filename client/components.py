# client/components.py
import streamlit as st
import pandas as pd

def show_table(rows, caption: str | None = None):
    """Render a list[dict] as a dataframe; otherwise show JSON."""
    if caption:
        st.caption(caption)
    if isinstance(rows, list) and rows and isinstance(rows[0], dict):
        st.dataframe(pd.DataFrame(rows), hide_index=True)
    else:
        st.write(rows)

def progress(index: int, total: int):
    """Progress bar for the wizard; index == total means done."""
    total = max(int(total), 1)
    st.progress(min(index, total) / total, text=f"Question {min(index + 1, total)} of {total}")
