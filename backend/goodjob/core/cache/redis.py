import redis

from goodjob.core.config import REDIS_HOST, REDIS_PORT, REDIS_DB

# 문자열로 주고받기 위해 decode_responses=True
redis_client = redis.Redis(
    host=REDIS_HOST,
    port=REDIS_PORT,
    db=REDIS_DB,
    decode_responses=True,
)
