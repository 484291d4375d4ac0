import sys

from aws_lambda_powertools import Logger


def get_logger(service_name: str, level: str | None = None) -> Logger:
    # stdout はメニュー表示に使うため、構造化ログは stderr に出す
    return Logger(service=service_name, level=level, stream=sys.stderr)
