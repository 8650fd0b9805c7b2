"""
Ministry Chat - Streamlit Frontend

A chat interface for the ministry chat gateway.
Sends each question plus the conversation so far to the FastAPI backend.

Run with: streamlit run streamlit_app.py
"""
import streamlit as st

from ministry_chat.client import BackendError, ConversationClient

# ============================================================
# Configuration
# ============================================================

st.set_page_config(
    page_title="Light Nation Assistant",
    page_icon="📖",
    layout="centered",
)


# ============================================================
# Session State Initialization
# ============================================================

def init_session_state():
    """Initialize session state variables."""
    if "messages" not in st.session_state:
        st.session_state.messages = []
    if "client" not in st.session_state:
        st.session_state.client = ConversationClient()


def history_for_backend() -> list:
    """Prior turns in the shape the gateway expects."""
    return [
        {"role": msg["role"], "content": msg["content"]}
        for msg in st.session_state.messages
    ]


# ============================================================
# Rendering
# ============================================================

def render_sources(sources: list):
    """Show citation links under an assistant message."""
    for source in sources:
        icon = "▶️" if source["type"] == "youtube" else "🎧"
        st.markdown(f"{icon} [{source['title']}]({source['uri']})")


def render_chat():
    """Render the main chat interface."""
    st.markdown("## Ask about the teachings of Apostle Femi Lazarus")

    for msg in st.session_state.messages:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])
            if msg.get("sources"):
                render_sources(msg["sources"])

    prompt = st.chat_input("Ask a question...")
    if not prompt:
        return

    history = history_for_backend()
    st.session_state.messages.append({"role": "user", "content": prompt})
    with st.chat_message("user"):
        st.markdown(prompt)

    with st.chat_message("assistant"):
        with st.spinner("Searching the sermons..."):
            try:
                reply = st.session_state.client.send_message(prompt, history)
            except BackendError as e:
                st.error(str(e))
                return
            except Exception as e:
                st.error(f"Cannot reach the backend server: {e}")
                return

        sources = [s.model_dump(mode="json") for s in reply.sources]
        st.markdown(reply.text)
        render_sources(sources)

    st.session_state.messages.append({
        "role": "assistant",
        "content": reply.text,
        "sources": sources,
    })


# ============================================================
# Main App
# ============================================================

def main():
    """Main application entry point."""
    init_session_state()

    with st.sidebar:
        st.markdown("### Conversation")
        if st.button("Clear chat"):
            st.session_state.messages = []
            st.rerun()

    render_chat()


if __name__ == "__main__":
    main()
