# invite_server/main.py
"""
컨설턴트 초대 메일 서버 실행. uvicorn invite_server.main:app --reload
"""
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

import logging

from config import PORT
from services.email.adapter import PROVIDER, send_invite_email
from services.email.schemas import INVITE_FIELDS, InviteRequest

# JSON에서 "값 없음"으로 보는 값들 ([]·{}는 값이 있는 것으로 취급)
BLANK_VALUES = (None, "", False, 0)

app = FastAPI(title="Consultant Invite Mailer")
logger = logging.getLogger("invite")
logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")

@app.get("/health")
async def health():
    return {"ok": True}

async def send_consultant_invite(request: Request):
    if request.method != "POST":
        return PlainTextResponse("Method Not Allowed", status_code=405)
    try:
        data = await request.json()
        if data is None:
            raise TypeError("request body is null")
        if not isinstance(data, dict):
            data = {}
        # 하나라도 없으면 발송하지 않음
        if any(data.get(k) in BLANK_VALUES for k in INVITE_FIELDS):
            return PlainTextResponse("Missing fields", status_code=400)

        invite = InviteRequest(**{k: str(data[k]) for k in INVITE_FIELDS})
        logger.info("recv to=%s inviter=%s", invite.to, invite.inviter)

        resp = await run_in_threadpool(send_invite_email, invite)
        if not resp.ok:
            return PlainTextResponse(f"{PROVIDER} error: {resp.detail}", status_code=500)
        return PlainTextResponse("Email sent", status_code=200)
    except Exception as e:
        logger.exception("send error")
        return PlainTextResponse(f"Error: {e}", status_code=500)

# 메서드 제한 없는 라우트: 405 판단은 핸들러가 직접 함
app.add_route("/send_consultant_invite", send_consultant_invite)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)
