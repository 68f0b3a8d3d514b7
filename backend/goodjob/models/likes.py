from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer
from sqlalchemy.sql import func

from goodjob.core.database import Base


# article / comment 중 하나만 채워짐
class Likes(Base):
    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    member_id = Column(Integer, ForeignKey("member.id", onupdate="CASCADE"), nullable=False)
    article_id = Column(Integer, ForeignKey("article.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=True)
    comment_id = Column(Integer, ForeignKey("comment.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=True)
    create_date = Column(DateTime, nullable=False, server_default=func.now())

    __table_args__ = (
        Index("idx_likes_article_id", "article_id"),
        Index("idx_likes_member_id", "member_id"),
    )
