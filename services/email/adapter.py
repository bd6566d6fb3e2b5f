# services/email/adapter.py
from __future__ import annotations
import logging
import requests
from .schemas import InviteRequest, EmailSendResponse
from config import SENDGRID_URL, SENDGRID_API_KEY, SENDGRID_TIMEOUT, FROM_EMAIL, FROM_NAME

logger = logging.getLogger(__name__)

PROVIDER = "SendGrid"

BODY_TEMPLATE = (
    "Hello {name},\n\n"
    "You have been invited by {inviter} to join as a consultant. "
    "Click the link below to accept the invitation and register:\n\n"
    "{invite_link}\n\n"
    "If you did not expect this, you can ignore this email."
)

def _session() -> requests.Session:
    # 재시도 없음: 실패는 호출자에게 그대로 전달
    return requests.Session()

def build_invite_payload(req: InviteRequest) -> dict:
    """SendGrid v3 mail/send 형식의 JSON 본문 생성"""
    return {
        "personalizations": [
            {
                "to": [{"email": req.to, "name": req.name}],
                "subject": f"Consultant Invitation from {req.inviter}",
            }
        ],
        "from": {"email": FROM_EMAIL, "name": FROM_NAME},
        "content": [
            {
                "type": "text/plain",
                "value": BODY_TEMPLATE.format(
                    name=req.name, inviter=req.inviter, invite_link=req.invite_link
                ),
            }
        ],
    }

def send_invite_email(req: InviteRequest) -> EmailSendResponse:
    """
    초대 메일을 SendGrid로 한 번 발송합니다.
    2xx가 아니면 ok=False와 함께 응답 본문을 detail에 그대로 담습니다.
    네트워크 오류(requests.RequestException)는 잡지 않고 호출자에게 올립니다.
    """
    headers = {
        "Authorization": f"Bearer {SENDGRID_API_KEY}",
        "Content-Type": "application/json",
    }

    with _session() as s:
        r = s.post(SENDGRID_URL, json=build_invite_payload(req), headers=headers, timeout=SENDGRID_TIMEOUT)

    status = r.status_code
    if not 200 <= status < 300:
        logger.warning("%s send failed: %s %s", PROVIDER, status, r.text)
        return EmailSendResponse(ok=False, status_code=status, detail=r.text)
    return EmailSendResponse(ok=True, status_code=status)
