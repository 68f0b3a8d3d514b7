from fastapi import APIRouter

from .features.member.router import router as member_router
from .features.mentoring.router import router as mentoring_router
from .features.article.router import router as article_router
from .features.likes.router import router as likes_router
from .features.job.router import router as job_router

# router 전체 관리
api_router = APIRouter()

api_router.include_router(member_router)
api_router.include_router(mentoring_router)
api_router.include_router(article_router)
api_router.include_router(likes_router)
api_router.include_router(job_router)
