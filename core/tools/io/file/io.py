"""
core/tools/io/file/io.py - 파일 I/O 유틸리티
"""

from pathlib import Path
from typing import Union


def ensure_dir(path: Union[str, Path]) -> Path:
    """디렉토리 존재 확인 및 생성

    Args:
        path: 디렉토리 경로

    Returns:
        생성된 경로 객체
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_file(
    filepath: Union[str, Path],
    content: str,
    encoding: str = "utf-8",
) -> Path:
    """파일 쓰기 (상위 디렉토리 자동 생성)

    Args:
        filepath: 파일 경로
        content: 파일 내용
        encoding: 인코딩 (기본값: utf-8)

    Returns:
        기록된 파일 경로

    Raises:
        OSError: 파일 쓰기 실패 시
    """
    filepath = Path(filepath)
    ensure_dir(filepath.parent)
    # 줄바꿈 변환 없이 content 그대로 기록
    with filepath.open("w", encoding=encoding, newline="") as f:
        f.write(content)
    return filepath
