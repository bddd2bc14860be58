"""python -m gas_safe 로 서버 실행"""
import uvicorn

from gas_safe.core.config import settings


def main() -> None:
    uvicorn.run("gas_safe.app:app", host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
