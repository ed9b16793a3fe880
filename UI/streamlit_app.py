# UI/streamlit_app.py
import re

import streamlit as st

from Proxy.config import settings
from Proxy.logging_config import setup_logging
from UI.chat_session import ChatController, ProxyClient

st.set_page_config(page_title="Leave Assistant", page_icon="🤖", layout="centered")
setup_logging()

SUGGESTIONS = [
    "what is my annual leave?",
    "my id is E001",
    "how many sick days do I have left?",
]

_MD_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|>~$<])")


def as_plain_markdown(text: str) -> str:
    """Escape markdown so a bubble shows the text exactly as sent; keep line breaks."""
    return _MD_SPECIAL.sub(r"\\\1", text).replace("\n", "  \n")


# ----------------------------
# Session state defaults
# ----------------------------
def _init_state():
    # one controller per browser session; lost on reload
    if "chat" not in st.session_state:
        st.session_state["chat"] = ChatController(ProxyClient(settings.CHAT_PROXY_URL).post)
    st.session_state.setdefault("draft", "")
    st.session_state.setdefault("pending_action", None)


_init_state()
chat: ChatController = st.session_state["chat"]


def run_action(action, *args):
    with st.spinner("Sending..."):
        action(*args)
    st.rerun()


def queue_draft(action: str):
    # button callback: runs before the script, so the draft widget can still be cleared here
    if chat.loading:
        return
    chat.set_input(st.session_state.get("draft", ""))
    st.session_state["draft"] = ""
    st.session_state["pending_action"] = action


pending = st.session_state.pop("pending_action", None)
if pending == "send":
    run_action(chat.send)
elif pending == "balance":
    run_action(chat.request_balance)


# ----------------------------
# UI Header
# ----------------------------
st.title("💬 Leave Assistant")
st.caption("Ask about your leave balance. Share your employee ID once and I'll remember it.")

id_col, forget_col = st.columns([3, 1])
with id_col:
    st.markdown(f"**Remembered ID:** {chat.state.remembered_id or '—'}")
with forget_col:
    if st.button("Forget ID", key="forget_id", disabled=not chat.state.remembered_id, use_container_width=True):
        chat.forget_identifier()
        st.rerun()

# ----------------------------
# Transcript
# ----------------------------
with st.container(height=420):
    for m in chat.messages:
        with st.chat_message(m.role):
            st.markdown(as_plain_markdown(m.text))

# ----------------------------
# Suggestions + actions
# ----------------------------
s_cols = st.columns(len(SUGGESTIONS))
for col, text in zip(s_cols, SUGGESTIONS):
    with col:
        if st.button(text, disabled=chat.loading, use_container_width=True):
            run_action(chat.send, text)

st.text_input(
    "Draft",
    key="draft",
    placeholder="Optional: type here, then Send or Get Balance",
    disabled=chat.loading,
)
send_col, balance_col = st.columns(2)
with send_col:
    st.button("Send", key="send_draft", on_click=queue_draft, args=("send",),
              disabled=chat.loading, use_container_width=True)
with balance_col:
    # empty draft -> "leave balance"
    st.button("Get Balance", key="get_balance", on_click=queue_draft, args=("balance",),
              type="secondary", disabled=chat.loading, use_container_width=True)

# Enter submits, Shift+Enter adds a newline
prompt = st.chat_input(
    "Type a message… e.g., 'what is my annual leave?' or 'my id is E001'",
    disabled=chat.loading,
)
if prompt:
    chat.set_input(prompt)
    run_action(chat.send)
