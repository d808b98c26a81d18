"""
KZG10 오류 분류
================

커밋먼트 스킴에서 발생하는 실패는 모두 입력에 대해 결정론적이다.
같은 입력으로 재시도해도 결과가 바뀌지 않으므로, 호출자가 잘못된 입력을
구분해서 거절할 수 있도록 서로 다른 예외 타입으로 표현한다.

  - LengthMismatchError: 다항식 길이 ≠ 공개 파라미터 n
  - DivisionByZeroError: 제수의 최고차 계수가 0 (영 다항식으로 나눔)
  - IntegrityViolationError: 몫 계산의 나머지가 0이 아님 등 내부 불변식 위반

기존 호출자가 내장 예외(ValueError, ZeroDivisionError)를 잡고 있어도
동작하도록 해당 내장 예외를 함께 상속한다.
"""


class KZGError(Exception):
    """KZG10 모듈의 모든 오류의 기반 클래스."""


class LengthMismatchError(KZGError, ValueError):
    """다항식 길이가 공개 파라미터의 n과 다를 때."""


class DivisionByZeroError(KZGError, ZeroDivisionError):
    """제수 다항식의 최고차 계수가 덧셈 항등원(0)일 때."""


class IntegrityViolationError(KZGError):
    """나눗셈 결과가 수학적으로 보장된 성질을 만족하지 않을 때.

    예: 열기 증명 생성 중 (p(x) - y) / (x - z)의 나머지가 0이 아님.
    """
