# client/pages/2_Upload_Form.py
import streamlit as st
import api as API
from components import show_table

st.title("📤 Upload Form")

f = st.file_uploader("Blank form", type=["pdf", "jpg", "jpeg", "png", "doc", "docx"])

if f is not None and st.button("Scan form"):
    try:
        res = API.upload(f.name, f.getvalue(), f.type)
        st.success(f"Found {res['totalFields']} fields in {res['fileName']}")
        show_table(res["extractedFields"])
        # hand the new session to the Fill Form page
        st.session_state.sid, st.session_state.index, st.session_state.pending = res["sessionId"], 0, None
        st.page_link("pages/1_Fill_Form.py", label="Fill it in", icon="📝")
    except Exception as e:
        st.error(e)
