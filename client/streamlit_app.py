# client/streamlit_app.py
import os
import requests
import streamlit as st

st.set_page_config(page_title="Voice Form Assistant", layout="wide")
st.title("🎙️ Voice Form Assistant")

st.markdown("""
This is the home page.

Use the **sidebar Pages** to open:
- **📝 Fill Form**: Answer the questions one at a time. Paste or type what was said; the backend normalizes it (emails, phone numbers, dates) before you confirm it.
- **📤 Upload Form**: Upload a blank PDF, image or Word form and fill in the fields found in it.

When every question is answered the filled form can be downloaded as a PDF.
""")

with st.sidebar:
    st.header("Settings")
    api_url = os.getenv("API_BASE_URL", "http://localhost:8000")
    st.text_input("API Base URL (from env)", value=api_url, disabled=True)
    if st.button("Health check"):
        try:
            r = requests.get(f"{api_url}/api/health", timeout=5)
            st.success(r.json())
        except Exception as e:
            st.error(f"Health check failed: {e}")

st.info("Tip: set `API_BASE_URL` in `client/.env` or export it before running `streamlit run client/streamlit_app.py`.")
