# config.py
"""
프로젝트 전체에서 공통으로 쓰는
 - 환경 변수 (.env) 로딩
 - SendGrid 발송 설정 상수 정의
"""

import os
from dotenv import load_dotenv

# 로컬 개발 시 .env 파일 로드
load_dotenv()

# --- SendGrid (초대 메일 발송) 관련 ---
SENDGRID_API_KEY: str = os.getenv("SENDGRID_API_KEY")
SENDGRID_URL: str = "https://api.sendgrid.com/v3/mail/send"
_timeout = os.getenv("SENDGRID_TIMEOUT")
SENDGRID_TIMEOUT: float | None = float(_timeout) if _timeout else None # 기본값 없음 (호스팅 환경에 위임)

# --- 발신자 ---
FROM_EMAIL: str = os.getenv("FROM_EMAIL") or "no-reply@yourdomain.com"
FROM_NAME: str = "Personal Finance App"

# --- 서버 ---
PORT: int = int(os.getenv("PORT", 8000)) # 기본값 8000
