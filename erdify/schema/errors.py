"""
SQL → ER 스키마 변환 중 호출자에게 전달되는 예외 정의

호출자에게 전달되는 파싱 예외는 EmptyInputError와 UnparseableSQLError 두 가지뿐입니다.
그 외의 실패(해석할 수 없는 ALTER TABLE 대상, 길이가 다른 FK 컬럼 목록,
테이블명 누락, 네이밍 추론 실패 등)는 내부에서 흡수하고 정보를 덜 만들어 낼 뿐입니다.
"""

PARSE_FAILURE_MESSAGE = "Failed to parse SQL. Please check your syntax."


class SchemaParseError(Exception):
    """스키마 파싱 예외의 공통 부모 클래스"""
    pass


class EmptyInputError(SchemaParseError):
    """입력 SQL이 비어 있거나 공백뿐인 경우 발생하는 예외"""

    def __init__(self, message: str = "SQL input is empty."):
        super().__init__(message)


class UnparseableSQLError(SchemaParseError):
    """어떤 dialect로도 SQL을 파싱하지 못한 경우 발생하는 예외"""

    def __init__(self, message: str = PARSE_FAILURE_MESSAGE):
        super().__init__(message)


class DDLDialectError(ValueError):
    """설정된 dialect 이름이 잘못되었거나 지원하지 않는 경우 발생하는 예외"""
    pass
