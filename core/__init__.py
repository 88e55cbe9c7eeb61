# core/__init__.py
"""
core - ECS Monitor 인프라

설정, 예외, AWS 클라이언트 생성, 실행 오케스트레이션을 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── aws/            # boto3 session/client 생성 (재시도 비활성화)
    ├── batching.py     # 고정 크기 청크 분할
    ├── config.py       # 실행 설정 (환경변수 → 불변 객체)
    ├── exceptions.py   # 통합 예외 계층
    └── runner.py       # 수집 → 셰이핑 → 발행 오케스트레이션

Usage:
    from core.config import MonitorConfig
    from core.runner import run_once

    result = run_once(MonitorConfig.from_env())
    print(result.message)
"""

from core import aws, batching, config, exceptions

__all__: list[str] = [
    # 서브패키지
    "aws",
    # 모듈
    "batching",
    "config",
    "exceptions",
]
