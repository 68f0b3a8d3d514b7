from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from .core.logger import log
from .common.exception_handlers import register_exception_handlers
from .api_router import api_router

app = FastAPI(title="GoodJob API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,  # 쿠키 전송 허용
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/favicon.ico", include_in_schema=False)
def favicon():
    return Response(status_code=204)

app.include_router(api_router)

log.info("GoodJob API ready")
