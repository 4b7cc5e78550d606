from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])

@router.get("/", response_class=PlainTextResponse)
def root():
    return "Backend is live"

@router.head("/")
def head_root():
    return Response(status_code=200)

@router.get("/health")
def health():
    return {"status": "ok"}
