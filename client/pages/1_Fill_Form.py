# client/pages/1_Fill_Form.py
import streamlit as st
import api as API
from components import progress, show_table

LANGUAGES = {"English": "en", "हिन्दी": "hi", "বাংলা": "bn", "తెలుగు": "te"}

st.title("📝 Fill Form")
ss = st.session_state

lang_label = st.selectbox("Language", list(LANGUAGES), index=0)
lang = LANGUAGES[lang_label]

if st.button("Start new form") or "sid" not in ss:
    res = API.start(lang)
    ss.sid, ss.index, ss.pending = res["sessionId"], 0, None

q = API.question(ss.sid, ss.index, lang)

if q["complete"]:
    st.success(q["message"])
    state = API.session(ss.sid)
    show_table([{"field": k, "value": v} for k, v in state["answers"].items()], caption="Your answers")
    st.download_button(API.translate("Download PDF", lang)["translatedText"],
                       data=API.pdf(ss.sid, lang), file_name="filled-form.pdf", mime="application/pdf")
    if st.button(API.translate("Start New Form", lang)["translatedText"]):
        del ss["sid"]
        st.rerun()
    st.stop()

progress(q["fieldIndex"], q["totalFields"])
st.subheader(q["question"])
if q["question"] != q["originalQuestion"]:
    st.caption(q["originalQuestion"])

said = st.text_input("What was said", key=f"said_{q['fieldIndex']}")
if st.button("Normalize") and said:
    try:
        ss.pending = API.answer(said, q["fieldId"], q["fieldType"], lang)
    except Exception as e:
        st.error(e)

if ss.get("pending") and ss.pending["field"] == q["fieldId"]:
    value = st.text_input("Value to save", value=ss.pending["value"], key=f"value_{q['fieldIndex']}")
    if st.button("Confirm and continue"):
        API.commit(ss.sid, q["fieldId"], value)
        ss.index, ss.pending = q["fieldIndex"] + 1, None
        st.rerun()
