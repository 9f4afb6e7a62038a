# core/tools/io - 파일 입출력 모듈
"""
파일 입출력 유틸리티

구조:
    core/tools/io/file/   - 기본 파일 I/O

사용 예시:
    from core.tools.io.file import write_file
"""

__all__ = [
    "file",
]
