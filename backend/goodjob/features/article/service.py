from sqlalchemy import select
from sqlalchemy.orm import Session

from goodjob.common.exceptions import NotFoundError
from goodjob.models.article import Article
from goodjob.models.comment import Comment
from .schemas import ArticleCreate, CommentCreate


# 등록
def create_article(db: Session, member_id: int, payload: ArticleCreate) -> Article:
    article = Article(
        member_id=member_id,
        subject=payload.subject,
        content=payload.content,
        view_count=0,
        like_count=0,
        is_deleted=False,
    )
    db.add(article)
    db.commit()
    db.refresh(article)
    return article


# 조회 :: 삭제된 글은 없는 글로 처리
def get_article(db: Session, article_id: int) -> Article:
    stmt = select(Article).where(Article.id == article_id, Article.is_deleted.is_(False))
    article = db.execute(stmt).scalar_one_or_none()
    if article is None:
        raise NotFoundError("게시글이 존재하지 않습니다.")
    return article


# 댓글 등록
def add_comment(db: Session, member_id: int, article_id: int, payload: CommentCreate) -> Comment:
    article = get_article(db, article_id)

    comment = Comment(
        member_id=member_id,
        article_id=article.id,
        content=payload.content,
        like_count=0,
        is_deleted=False,
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment
