from .member import Member, Membership
from .article import Article
from .comment import Comment
from .likes import Likes
from .job import Job

__all__ = ["Member", "Membership", "Article", "Comment", "Likes", "Job"]
