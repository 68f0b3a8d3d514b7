"""
DB 초기화
---------------------------------
member / article / comment / likes / job table 생성

사용:
python -m goodjob.init_db
"""

import logging

from goodjob import models  # noqa: F401  (model import 시 Base.metadata 에 등록)
from goodjob.core.database import Base, engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("tables created: %s", ", ".join(sorted(Base.metadata.tables)))


if __name__ == "__main__":
    from goodjob.core.logger import log

    init_db()
    log.info("database ready")
