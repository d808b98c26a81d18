"""
KZG10 기반 모듈: 고정 길이 다항식(Polynomial)
===============================================

커밋먼트 스킴에서 사용하는 계수 표현 다항식이다.
p(x) = c₀ + c₁·x + ... + c_{L-1}·x^{L-1}

**고정 길이 (trim 없음)**:
  계수 리스트의 길이 L은 생성 시점에 고정되며, 최고차 쪽의 0 계수를
  잘라내지 않는다. [1, 2, 0]과 [1, 2]는 서로 다른 다항식 값이다.
  커밋먼트는 길이 L = n인 다항식만 받는다.

**값 타입 (immutable)**:
  모든 연산은 새 Polynomial을 반환하고, 자기 자신을 바꾸지 않는다.
  계수는 tuple로 보관한다. 여러 스레드에서 공유해도 안전하다.

**차수(degree)**:
  0이 아닌 계수의 최고 인덱스. 영 다항식은 차수가 없다 (None).
  None은 차수 0과 절대 혼동하지 않는다.

**용량 제한 곱셈 (capped multiply)**:
  multiply는 일반 다항식 곱이 아니다. 결과 길이를 len(self)로 고정하고
  양쪽 피연산자의 마지막 슬롯을 건너뛴다. 범위를 벗어나는 항은 버려진다.
  divide는 이 제약을 전제로 버퍼 길이를 잡는다.

**나눗셈 (divide)**:
  1차 제수 (x - z) 전용 긴 나눗셈. 몫 슬롯을 d - 1로 잡는다.
  임의 차수 제수는 poly_div를 사용한다.

사용 예시:
    >>> from zkp.kzg10.field import FR
    >>> from zkp.kzg10.polynomial import Polynomial
    >>> p = Polynomial([FR(-4), FR(0), FR(-2), FR(1)])   # x³ - 2x² - 4
    >>> d = Polynomial([FR(-3), FR(1), FR(0), FR(0)])    # x - 3
    >>> q, r = p.divide(d)
    >>> q  # Poly([3, 1, 1, 0])  → x² + x + 3
    >>> r  # Poly([5, 0, 0, 0])
"""

from py_ecc.fields.field_elements import FQ

from zkp.kzg10.errors import DivisionByZeroError, IntegrityViolationError
from zkp.kzg10.field import FR, powers


class Polynomial:
    """스칼라 필드 위의 고정 길이 다항식.

    속성:
        coeffs: 계수 tuple (coeffs[i]는 xⁱ의 계수)
        field: 계수가 속한 스칼라 필드 클래스

    예시:
        >>> p = Polynomial([FR(1), FR(2), FR(0)])  # 1 + 2x (길이 3)
        >>> p.degree()                             # 1
        >>> len(p)                                 # 3
    """

    def __init__(self, coeffs, field=None):
        """다항식 생성.

        Args:
            coeffs: 계수 리스트 [c₀, c₁, ...] (정수 또는 필드 원소)
            field: 스칼라 필드 클래스. None이면 첫 필드 원소 계수의 타입,
                   그것도 없으면 bn128의 FR.
        """
        coeffs = list(coeffs)
        if field is None:
            field = next((type(c) for c in coeffs if isinstance(c, FQ)), FR)
        self.field = field
        self._coeffs = tuple(self._coerce(c) for c in coeffs)

    def _coerce(self, value):
        if isinstance(value, self.field):
            return value
        if isinstance(value, FQ):
            value = int(value)
        return self.field(value)

    @classmethod
    def zeros(cls, length, field=None):
        """길이 length의 영 다항식을 만든다."""
        field = field or FR
        return cls([field.zero()] * length, field)

    @property
    def coeffs(self):
        return self._coeffs

    def with_coeff(self, index, value):
        """index 슬롯만 value로 바꾼 새 다항식을 반환한다."""
        coeffs = list(self._coeffs)
        coeffs[index] = self._coerce(value)
        return Polynomial(coeffs, self.field)

    # ─────────────────────────────────────────────────────────────
    # 차수 / 평가
    # ─────────────────────────────────────────────────────────────

    def degree(self):
        """최고차 비영(非零) 계수의 인덱스. 영 다항식이면 None.

        예시:
            >>> Polynomial([FR(1), FR(1), FR(0)]).degree()  # 1
            >>> Polynomial([FR(0), FR(0)]).degree()          # None
        """
        for i in range(len(self._coeffs) - 1, -1, -1):
            if self._coeffs[i] != 0:
                return i
        return None

    def is_zero(self):
        """모든 계수가 0인지 확인 (길이와 무관)."""
        return self.degree() is None

    def evaluate(self, point):
        """p(point) = Σ cᵢ · pointⁱ 를 계산한다.

        거듭제곱 사다리는 len + 1개를 만든다 (마지막 하나는 쓰이지 않음).

        Args:
            point: 평가 점 (정수 또는 필드 원소)

        Returns:
            필드 원소: p(point)

        예시:
            >>> Polynomial([FR(1), FR(2), FR(3)]).evaluate(FR(2))  # 17
        """
        point = self._coerce(point)
        ladder = powers(point, len(self._coeffs) + 1)
        result = self.field.zero()
        for coeff, power in zip(self._coeffs, ladder):
            result = result + coeff * power
        return result

    # ─────────────────────────────────────────────────────────────
    # 산술 연산
    # ─────────────────────────────────────────────────────────────

    def add(self, other):
        """계수별 덧셈. 짧은 쪽은 0으로 채운다 (결과 길이 = 최대 길이)."""
        return self._pointwise(other, lambda a, b: a + b)

    def subtract(self, other):
        """계수별 뺄셈. 짧은 쪽은 0으로 채운다 (결과 길이 = 최대 길이)."""
        return self._pointwise(other, lambda a, b: a - b)

    def _pointwise(self, other, op):
        zero = self.field.zero()
        length = max(len(self), len(other))
        result = []
        for i in range(length):
            a = self._coeffs[i] if i < len(self) else zero
            b = other.coeffs[i] if i < len(other) else zero
            result.append(op(a, b))
        return Polynomial(result, self.field)

    def multiply(self, other):
        """용량 제한 합성곱 (bounded-buffer convolution).

        결과 길이는 len(self)로 고정된다.
        - i, j는 각각 0..len-2 범위만 돈다 (양쪽 마지막 슬롯은 제외)
        - i + j ≥ len(self)인 항은 버린다

        일반 다항식 곱이 아니다. 두 다항식의 차수 합보다 충분히 긴
        버퍼(len(self))를 준비했을 때만 참 곱과 같다.

        예시:
            >>> a = Polynomial([FR(1), FR(1), FR(0), FR(0)])  # 1 + x
            >>> a.multiply(Polynomial([FR(2), FR(1), FR(0), FR(0)]))
            Poly([2, 3, 1, 0])
        """
        length = len(self._coeffs)
        result = [self.field.zero()] * length
        for i in range(length - 1):
            a = self._coeffs[i]
            if a == 0:
                continue
            for j in range(len(other) - 1):
                b = other.coeffs[j]
                if b == 0 or i + j >= length:
                    continue
                result[i + j] = result[i + j] + a * b
        return Polynomial(result, self.field)

    def scale(self, scalar):
        """스칼라곱: scalar · p(x)."""
        scalar = self._coerce(scalar)
        return Polynomial([c * scalar for c in self._coeffs], self.field)

    def divide(self, divisor, accumulator=None):
        """1차 제수에 대한 긴 나눗셈. (몫, 나머지)를 반환한다.

        한 단계:
          1. d = deg(피제수), c = lead(피제수) / lead(제수)
          2. 몫의 d - 1 슬롯에 c를 기록
          3. c·x^(d-1) 을 제수와 (용량 제한) 곱한다
          4. 피제수에서 빼서 새 나머지를 얻고 반복

        종료 조건:
          - 피제수가 영 다항식 → (몫, 0)
          - deg(피제수) < deg(제수) → (몫, 피제수)

        몫 슬롯 d - 1은 deg(제수) = 1일 때만 맞다 (이 스킴이 쓰는 x - z).
        제수 버퍼가 짧아서 최고차 항이 소거되지 않으면 무한 반복 대신
        IntegrityViolationError를 낸다.

        Args:
            divisor: 제수 다항식
            accumulator: 이전 단계까지의 몫 (처음 호출 시 None)

        Returns:
            tuple: (몫 Polynomial, 나머지 Polynomial)
                   몫이 새로 만들어질 때 길이는 피제수 길이와 같다.

        Raises:
            DivisionByZeroError: 제수의 최고차 계수가 0 (영 다항식)
            IntegrityViolationError: 최고차 항이 소거되지 않을 때
        """
        divisor_degree = divisor.degree()
        if divisor_degree is None:
            raise DivisionByZeroError("0으로 나눌 수 없습니다: 제수의 최고차 계수가 0입니다")
        lead_inv = self.field.one() / divisor.coeffs[divisor_degree]

        dividend = self
        quotient = accumulator
        while True:
            if dividend.is_zero():
                if quotient is None:
                    quotient = Polynomial.zeros(len(dividend), self.field)
                return quotient, Polynomial.zeros(len(dividend), self.field)

            degree = dividend.degree()
            if degree < divisor_degree:
                if quotient is None:
                    quotient = Polynomial.zeros(len(dividend), self.field)
                return quotient, dividend

            slot = degree - 1
            if slot < 0:
                raise IntegrityViolationError(
                    "몫 슬롯 d-1이 음수입니다: 상수 제수는 지원하지 않습니다"
                )
            if quotient is None:
                quotient = Polynomial.zeros(len(dividend), self.field)

            coeff = dividend.coeffs[degree] * lead_inv
            quotient = quotient.with_coeff(slot, coeff)
            multiplier = Polynomial.zeros(len(dividend), self.field).with_coeff(slot, coeff)

            remainder = dividend.subtract(divisor.multiply(multiplier))
            remainder_degree = remainder.degree()
            if remainder_degree is not None and remainder_degree >= degree:
                raise IntegrityViolationError(
                    f"최고차 항(x^{degree})이 소거되지 않았습니다: 제수 버퍼 길이 {len(divisor)}"
                )
            dividend = remainder

    # ─────────────────────────────────────────────────────────────
    # 연산자 / 컨테이너 프로토콜
    # ─────────────────────────────────────────────────────────────

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, other):
        """Polynomial이면 용량 제한 곱, 스칼라면 스칼라곱."""
        if isinstance(other, Polynomial):
            return self.multiply(other)
        return self.scale(other)

    def __neg__(self):
        return Polynomial([-c for c in self._coeffs], self.field)

    def __eq__(self, other):
        """길이와 계수가 모두 같아야 같은 다항식이다."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other.coeffs

    __hash__ = None

    def __len__(self):
        return len(self._coeffs)

    def __getitem__(self, index):
        return self._coeffs[index]

    def __iter__(self):
        return iter(self._coeffs)

    def __repr__(self):
        return "Poly([" + ", ".join(str(int(c)) for c in self._coeffs) + "])"


def poly_div(a, b):
    """임의 차수 제수에 대한 일반 긴 나눗셈: a(x) = q(x)·b(x) + r(x).

    Polynomial.divide와 달리 몫 슬롯을 d - deg(b)로 잡고,
    용량 제한 곱셈을 쓰지 않는다. 몫과 나머지의 길이는 len(a)이다.

    Args:
        a: 피제수 다항식
        b: 제수 다항식

    Returns:
        tuple: (몫 Polynomial, 나머지 Polynomial)

    Raises:
        DivisionByZeroError: 제수가 영 다항식인 경우

    예시:
        >>> a = Polynomial([FR(4), FR(3), FR(2), FR(1)])  # x³ + 2x² + 3x + 4
        >>> b = Polynomial([FR(1), FR(0), FR(1)])         # x² + 1 (2차 제수)
        >>> q, r = poly_div(a, b)
        >>> q  # Poly([2, 1, 0, 0])  → x + 2
        >>> r  # Poly([2, 2, 0, 0])  → 2x + 2
    """
    deg_b = b.degree()
    if deg_b is None:
        raise DivisionByZeroError("0으로 나눌 수 없습니다")

    field = a.field
    remainder = list(a.coeffs)
    quotient = [field.zero()] * len(a)
    deg_a = a.degree()
    if deg_a is None or deg_a < deg_b:
        return Polynomial(quotient, field), Polynomial(remainder, field)

    lead_inv = field.one() / b.coeffs[deg_b]  # 제수 최고차 계수의 역원
    for i in range(deg_a - deg_b, -1, -1):
        coeff = remainder[i + deg_b] * lead_inv
        quotient[i] = coeff
        for j in range(deg_b + 1):
            remainder[i + j] = remainder[i + j] - coeff * b.coeffs[j]

    return Polynomial(quotient, field), Polynomial(remainder, field)
