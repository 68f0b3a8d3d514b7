from sqlalchemy.orm import Session

from goodjob.features.article import service as article_service
from goodjob.models.likes import Likes
from .schemas import LikesRequest


# 게시글 좋아요 :: likes 저장 + article like_count 증가
def like_article(db: Session, member_id: int, payload: LikesRequest) -> Likes:
    article = article_service.get_article(db, payload.article_id)

    likes = Likes(
        member_id=member_id,
        article_id=article.id,
        comment_id=None,
    )
    db.add(likes)
    article.like_count = (article.like_count or 0) + 1
    db.commit()
    db.refresh(likes)
    return likes
