"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.
Lambda와 같은 파이프라인(core.runner.run_once)을 로컬에서 1회 실행합니다.

명령어 구조:
    ecs-monitor --version               # 버전 표시
    ecs-monitor run                     # 수집 후 CloudWatch 발행
    ecs-monitor run --dry-run           # 수집만 하고 메트릭 표 출력
    ecs-monitor run --dry-run --json    # 수집 결과를 JSON으로 출력

Usage:
    $ ecs-monitor run -r ap-southeast-2 -n ecs-services
    $ ecs-monitor run -p my-profile --dry-run

    # 모듈로 실행
    $ python -m cli.app run
"""

from __future__ import annotations

import json
import logging

import click

from core.config import MonitorConfig, get_version
from core.exceptions import MonitorError, format_error_for_user

VERSION = get_version()


@click.group()
@click.version_option(VERSION, prog_name="ecs-monitor")
def cli() -> None:
    """ECS Monitor - ECS 서비스 카운트를 CloudWatch 메트릭으로 발행"""


@cli.command("run")
@click.option("-r", "--region", default=None, help="리전 (기본: REGION/AWS_REGION 환경변수)")
@click.option("-n", "--namespace", default=None, help="CloudWatch 네임스페이스 (기본: CLOUDWATCH_NAMESPACE 또는 ecs-services)")
@click.option("-p", "--profile", default=None, help="AWS 프로파일")
@click.option("--dry-run", "dry_run", is_flag=True, help="수집만 하고 발행하지 않음")
@click.option("--json", "as_json", is_flag=True, help="수집된 메트릭을 JSON 형식으로 출력")
@click.option("-q", "--quiet", is_flag=True, help="최소 출력 모드")
@click.option("--debug", is_flag=True, help="DEBUG 로그 출력")
def run_command(
    region: str | None,
    namespace: str | None,
    profile: str | None,
    dry_run: bool,
    as_json: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """ECS 서비스 메트릭 수집 및 발행 (1회)

    \b
    Examples:
        ecs-monitor run                       # 환경변수 설정으로 실행
        ecs-monitor run -r us-east-1          # 리전 지정
        ecs-monitor run --dry-run             # 발행 없이 표 출력
    """
    from cli.ui import print_error, print_info, print_success, print_table, setup_logging
    from core.runner import run_once

    if debug:
        setup_logging(logging.DEBUG)
    elif not quiet:
        setup_logging(logging.INFO)
    else:
        setup_logging(logging.WARNING)

    try:
        config = MonitorConfig.from_env().with_overrides(
            region=region,
            namespace=namespace,
            profile=profile,
            dry_run=dry_run or None,
        )
        result = run_once(config)
    except MonitorError as e:
        print_error(format_error_for_user(e))
        if debug:
            click.echo(json.dumps(e.to_dict(), ensure_ascii=False, indent=2), err=True)
        raise SystemExit(1) from e

    if as_json:
        click.echo(
            json.dumps(
                [record.to_metric_datum() for record in result.metrics],
                ensure_ascii=False,
                indent=2,
            )
        )
        return

    if config.dry_run and not quiet:
        print_table(
            f"{config.namespace} (dry run)",
            ["Cluster", "Service", "Metric", "Value", "Unit"],
            [[r.cluster_name, r.service_name, r.metric_name, r.value, r.unit] for r in result.metrics],
        )

    summary = (
        f"{result.message}: {len(result.metrics)} metrics, "
        f"{result.collection.service_count} services, {result.collection.cluster_count} clusters"
    )
    if quiet:
        click.echo(result.message)
    elif config.dry_run:
        print_info(summary)
    else:
        print_success(summary)


if __name__ == "__main__":
    cli()
