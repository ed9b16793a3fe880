# UI/chat_session.py
import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import requests

from Proxy.schemas import ChatIntent, ChatRequest, ChatResponse, Message
from UI.nlp_utils import extract_employee_id

logger = logging.getLogger("leave_chat.ui")

GREETING = (
    "Hi! I can check your leave balance. You can say 'what is my annual leave?' or click Get Balance. "
    "If you share your employee ID once (e.g., E001), I'll remember it for this session."
)
BALANCE_FALLBACK_TEXT = "leave balance"
NO_REPLY_TEXT = "No reply"
# seconds to wait on the proxy before showing an Error: bubble
PROXY_TIMEOUT_S = 8

Transport = Callable[[ChatRequest], ChatResponse]


class ProxyClient:
    """Posts ChatRequests to the proxy's /api/chat and decodes the reply."""

    def __init__(self, url: str, session: Optional[requests.Session] = None, timeout: float = PROXY_TIMEOUT_S):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def post(self, req: ChatRequest) -> ChatResponse:
        r = self.session.post(
            self.url,
            json=req.to_payload(),
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        # the proxy's status is not checked: error bodies still carry {"error": ...}
        return ChatResponse.from_payload(r.json())


@dataclass
class SessionState:
    messages: List[Message] = field(default_factory=list)
    input: str = ""
    remembered_id: Optional[str] = None
    loading: bool = False


class ChatController:
    """
    Owns one chat session and moves it between idle and sending.

    Only one request may be in flight; send/request_balance while loading
    return False and change nothing. Requests are never cancelled, so a
    response always lands in the transcript.
    """

    def __init__(self, transport: Transport, state: Optional[SessionState] = None, greeting: Optional[str] = GREETING):
        self.transport = transport
        self.state = state or SessionState()
        if greeting and not self.state.messages:
            self.state.messages.append(Message(role="assistant", text=greeting))
        self._lock = threading.Lock()

    @property
    def messages(self) -> List[Message]:
        return list(self.state.messages)

    @property
    def loading(self) -> bool:
        return self.state.loading

    def set_input(self, text: str) -> None:
        self.state.input = text or ""

    def forget_identifier(self) -> None:
        self.state.remembered_id = None

    def send(self, text: Optional[str] = None) -> bool:
        msg = (self.state.input if text is None else text).strip()
        if not msg:
            return False
        return self._dispatch(msg, intent=None)

    def request_balance(self, text: Optional[str] = None) -> bool:
        msg = (self.state.input if text is None else text).strip() or BALANCE_FALLBACK_TEXT
        return self._dispatch(msg, intent=ChatIntent.BALANCE)

    def _begin(self) -> bool:
        with self._lock:
            if self.state.loading:
                return False
            self.state.loading = True
            return True

    def _dispatch(self, msg: str, intent: Optional[ChatIntent]) -> bool:
        if not self._begin():
            logger.info("send ignored: a request is already in flight")
            return False

        try:
            # optimistic: the user's bubble shows before the reply arrives
            self.state.messages.append(Message(role="user", text=msg))
            self.state.input = ""

            found = extract_employee_id(msg)
            if found:
                self.state.remembered_id = found

            req = ChatRequest(message=msg, employee_id=self.state.remembered_id, intent=intent)
            try:
                data = self.transport(req)
                reply = data.display_text(NO_REPLY_TEXT)
            except Exception as e:
                logger.warning("chat request failed: %s", e)
                reply = f"Error: {str(e) or type(e).__name__}"
            self.state.messages.append(Message(role="assistant", text=reply))
        finally:
            self.state.loading = False
        return True
