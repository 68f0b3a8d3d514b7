from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.sql import func

from goodjob.core.database import Base


class Comment(Base):
    __tablename__ = "comment"

    id = Column(Integer, primary_key=True, autoincrement=True)
    member_id = Column(Integer, ForeignKey("member.id", onupdate="CASCADE"), nullable=False)
    article_id = Column(Integer, ForeignKey("article.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False)
    content = Column(Text, nullable=False)
    like_count = Column(Integer, nullable=False, default=0)
    is_deleted = Column(Boolean, nullable=False, default=False)
    create_date = Column(DateTime, nullable=False, server_default=func.now())
    modify_date = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("idx_comment_article_id", "article_id"),
        Index("idx_comment_member_id", "member_id"),
    )
