# core/tools - 공통 도구
"""
캐시, 파일 I/O 등 공통 도구

구조:
    core/tools/cache/  - 인메모리 조회 캐시
    core/tools/io/     - 파일 입출력
"""

__all__ = [
    "cache",
    "io",
]
