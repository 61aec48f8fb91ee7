"""
저장소 서버 진입점

실행 방법:
    python -m web
    DATA_STORE=sqlite DATABASE_PATH=./data/kv.sqlite python -m web --port 9000
"""

import argparse

import uvicorn

from core.constants import Defaults


def parse_args() -> argparse.Namespace:
    """명령행 인자 파싱"""
    parser = argparse.ArgumentParser(description="Remote storage server")
    parser.add_argument("--host", default=Defaults.WEB_HOST, help="바인드 주소")
    parser.add_argument("--port", type=int, default=Defaults.WEB_PORT, help="포트")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    uvicorn.run(
        "web.app:app",
        host=args.host,
        port=args.port,
        reload=False,
    )
