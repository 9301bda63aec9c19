from celery import Celery

from walletcache.config import settings

celery_app = Celery(
    "walletcache",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["walletcache.workers.tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
    task_ignore_result=False,
)
