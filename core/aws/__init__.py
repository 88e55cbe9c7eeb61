"""
core/aws - boto3 session/client 생성

Example:
    from core.aws import create_session, get_client

    session = create_session(config)
    ecs = get_client(session, "ecs", region_name=config.region)
"""

from .client import create_session, get_client

__all__: list[str] = [
    "create_session",
    "get_client",
]
