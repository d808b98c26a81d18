"""
KZG10 기반 모듈: 스칼라 필드, 타원곡선 그룹, 페어링
=====================================================

KZG 커밋먼트는 특정 곡선에 묶여 있지 않다. 필요한 것은 다음 세 가지뿐이다.

**스칼라 필드 (scalar field)**:
  곡선 위수(curve order) r 위의 소수체. 다항식 계수, 평가 점, 비밀 값 s가
  모두 이 필드의 원소이다. 덧셈/뺄셈/곱셈/역원/비교를 지원한다.

**두 개의 소스 그룹 G1, G2**:
  덧셈으로 표기되는 타원곡선 그룹. 스칼라 곱, 덧셈, 항등원, 비교,
  정규(affine) 표현으로의 변환을 지원한다.

**쌍선형 페어링 e: G1 × G2 → GT**:
  e(a·P, b·Q) = e(P, Q)^(ab). 검증 방정식의 유일한 근거이다.

이 모듈은 py_ecc의 최적화(projective 좌표) 백엔드를 Curve 객체로 감싸서
위 기능만 노출한다. 나머지 모듈은 Curve의 메서드만 호출하므로 곡선을
교체해도 커밋먼트 로직은 바뀌지 않는다.

  - BN128: 이더리움 precompile 곡선 (기본값)
  - BLS12_381: 페어링 친화 곡선, 128비트 보안 수준

주의:
  projective 좌표에서는 같은 점이 여러 튜플로 표현되므로
  점 비교는 반드시 Curve.eq를 사용해야 한다 (== 사용 금지).

사용 예시:
    >>> from zkp.kzg10.field import BN128, powers
    >>> FR = BN128.field
    >>> P = BN128.mul(BN128.G1, FR(5))      # 5·G1
    >>> BN128.eq(BN128.add(P, P), BN128.mul(BN128.G1, 10))  # True
    >>> powers(FR(2), 4)                     # [1, 2, 4, 8]
"""

from py_ecc import optimized_bn128, optimized_bls12_381
from py_ecc.fields import bn128_FQ, bls12_381_FQ
from py_ecc.fields.field_elements import FQ


# ─────────────────────────────────────────────────────────────────────
# 스칼라 필드
# ─────────────────────────────────────────────────────────────────────

class FR(bn128_FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ를 상속하여 +, -, *, /, ** 연산을 그대로 사용한다.

    주의:
        FQ의 나눗셈은 0의 역원을 0으로 돌려준다 (예외 없음).
        0으로 나누는 경우는 호출하는 쪽에서 직접 검사해야 한다.
    """
    field_modulus = optimized_bn128.curve_order


class BLS12_381_FR(bls12_381_FQ):
    """bls12_381 스칼라 필드 위의 유한체 원소."""
    field_modulus = optimized_bls12_381.curve_order


# ─────────────────────────────────────────────────────────────────────
# 곡선 래퍼
# ─────────────────────────────────────────────────────────────────────

class Curve:
    """페어링 곡선 하나에 대한 대수적 기능 묶음.

    속성:
        name: 곡선 이름 ("bn128", "bls12_381")
        field: 스칼라 필드 클래스 (FQ 서브클래스)
        curve_order: 스칼라 필드 위수 r
        G1, G2: 각 소스 그룹의 생성자
        Z1, Z2: 각 소스 그룹의 항등원 (무한원점)
    """

    def __init__(self, name, backend, field):
        self.name = name
        self.field = field
        self.curve_order = backend.curve_order
        self.G1 = backend.G1
        self.G2 = backend.G2
        self.Z1 = backend.Z1
        self.Z2 = backend.Z2
        self._ec = backend
        self._b = backend.b
        self._b2 = backend.b2

    def __repr__(self):
        return f"Curve({self.name})"

    def scalar(self, value):
        """정수 또는 필드 원소를 이 곡선의 스칼라 필드 원소로 변환한다."""
        if isinstance(value, self.field):
            return value
        if isinstance(value, FQ):
            value = int(value)
        return self.field(value)

    def mul(self, point, scalar):
        """스칼라 곱: scalar · point.

        Args:
            point: G1 또는 G2 위의 점
            scalar: 정수 또는 필드 원소 (곡선 위수로 환원된다)

        Returns:
            같은 그룹의 점
        """
        if isinstance(scalar, FQ):
            scalar = int(scalar)
        return self._ec.multiply(point, scalar % self.curve_order)

    def add(self, p1, p2):
        """점 덧셈: p1 + p2 (같은 그룹)."""
        return self._ec.add(p1, p2)

    def neg(self, point):
        """점의 역원: -point."""
        return self._ec.neg(point)

    def sub(self, p1, p2):
        """점 뺄셈: p1 - p2."""
        return self._ec.add(p1, self.neg(p2))

    def eq(self, p1, p2):
        """projective 표현에 무관한 점 비교."""
        return self._ec.eq(p1, p2)

    def is_on_g1(self, point):
        """G1 곡선 방정식을 만족하는지 확인 (항등원 포함)."""
        return self._ec.is_on_curve(point, self._b)

    def is_on_g2(self, point):
        """G2 (twist) 곡선 방정식을 만족하는지 확인."""
        return self._ec.is_on_curve(point, self._b2)

    def is_identity(self, point):
        """무한원점 여부 (projective z 좌표가 0)."""
        z = point[2]
        return z == z.zero()

    def to_affine(self, point):
        """정규(affine) 표현 (x, y)로 변환한다. 항등원이면 None."""
        if self.is_identity(point):
            return None
        x, y, z = point
        return x / z, y / z

    def pairing(self, g1_point, g2_point):
        """쌍선형 페어링 e(P, Q) → GT.

        Args:
            g1_point: G1 위의 점 P
            g2_point: G2 위의 점 Q

        Returns:
            GT 원소 (FQ12). 항등원이 섞이면 GT의 1.

        주의:
            py_ecc.pairing의 인자 순서는 (G2, G1)이다.
        """
        return self._ec.pairing(g2_point, g1_point)


BN128 = Curve("bn128", optimized_bn128, FR)
BLS12_381 = Curve("bls12_381", optimized_bls12_381, BLS12_381_FR)

# 곡선 위수 (기본 곡선의 필드 크기)
CURVE_ORDER = BN128.curve_order


# ─────────────────────────────────────────────────────────────────────
# 거듭제곱 사다리 (power ladder)
# ─────────────────────────────────────────────────────────────────────

def powers(x, n):
    """[x⁰, x¹, ..., x^(n-1)]을 반환한다.

    trusted setup에서는 비밀 값 s의 거듭제곱 [1, s, s², ...]을 만들고,
    다항식 평가에서는 평가 점 z의 거듭제곱을 만드는 데 사용한다.

    Args:
        x: 필드 원소 (정수이면 기본 필드 FR로 변환)
        n: 원소 개수

    Returns:
        list: 길이 n의 리스트. n = 0이면 빈 리스트.
              x = 0이어도 첫 원소는 1 (x⁰ = 1 관례).

    예시:
        >>> powers(FR(2), 4)   # [1, 2, 4, 8]
        >>> powers(FR(0), 3)   # [1, 0, 0]
    """
    if not isinstance(x, FQ):
        x = FR(x)
    result = []
    current = type(x).one()
    for _ in range(n):
        result.append(current)
        current = current * x
    return result
