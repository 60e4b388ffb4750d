# 커스텀 예외 클래스 정의
# 주니어 개발자님께: 서비스 레이어는 HTTP를 모릅니다.
# 여기 정의한 예외를 발생시키면 core/handlers.py가 상태 코드와 응답 본문으로 바꿔 줍니다.

class RecetarioError(Exception):
    """서비스 공통 기본 예외 클래스

    Attributes:
        status_code: 응답 HTTP 상태 코드
        message: 클라이언트에게 그대로 전달되는 메시지
    """
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConflictError(RecetarioError):
    """이메일/사용자명 중복 (원본 API와 동일하게 400)"""
    status_code = 400


class AuthError(RecetarioError):
    """로그인 자격 증명 불일치"""
    status_code = 401


class NotFoundError(RecetarioError):
    """대상 문서/상품이 존재하지 않음"""
    status_code = 404


class BadRequestError(RecetarioError):
    """필드 단위 검증은 통과했지만 요청 자체가 의미가 없는 경우 (예: 빈 수정 요청)"""
    status_code = 400


class UnexpectedStoreError(RecetarioError):
    """저장소(MongoDB) 호출 실패

    주니어 개발자님께: 저장소 에러 메시지를 가공하지 않고 그대로 클라이언트에 전달합니다.
    내부 정보가 노출될 수 있다는 점을 알고 선택한 정책입니다.

    Attributes:
        operation: 실패한 작업 이름 (예: "update recipes")
    """
    status_code = 500

    def __init__(self, message: str, operation: str = None):
        self.operation = operation
        super().__init__(message)
