"""
erdify - SQL DDL을 ER 다이어그램용 스키마 모델(tables + relationships)로 변환합니다.
"""
__version__ = "0.1.0"
