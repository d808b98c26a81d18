"""
KZG10 다항식 커밋먼트 스킴
===========================

Kate-Zaverucha-Goldberg (KZG) 커밋먼트: 길이 n 미만 차수의 다항식 p(x)를
G1 점 하나로 커밋하고, 나중에 "p(z) = y"를 짧은 증명으로 보인다.
검증자는 p(x)를 몰라도 페어링 한 번의 비교로 확인한다.

**흐름**:
  setup(n)                     → PublicParams
  commit(pp, p)                → C = Σ cᵢ·[sⁱ]₁ = p(s)·G1
  create_witness(pp, p, z)     → Witness{point=π, z, y=p(z)}
  verify(pp, witness, C)       → bool

**열기 증명 (Opening Proof)**:
  1. y = p(z)
  2. 몫 다항식 q(x) = (p(x) - y) / (x - z)
     (p(z) - y = 0 이므로 (x - z)가 나누어 떨어진다: 인수정리)
  3. π = commit(q)

**검증 방정식**:
  e(π, [s]₂ - [z]₂) == e(C - [y]₁, [1]₂)
  즉 q(s)·(s - z) == p(s) - y 를 s를 모른 채 확인한다.

사용 예시:
    >>> from zkp.kzg10.kzg import setup, commit, create_witness, verify
    >>> pp = setup(3, randomness=SeededRandomness(42))
    >>> p = Polynomial([FR(-4), FR(0), FR(1)])  # x² - 4
    >>> C = commit(pp, p)
    >>> w = create_witness(pp, p, FR(2))
    >>> verify(pp, w, C)  # True
"""

import logging

from zkp.kzg10.errors import IntegrityViolationError, LengthMismatchError
from zkp.kzg10.field import BN128
from zkp.kzg10.polynomial import Polynomial
from zkp.kzg10.srs import generate_public_params

logger = logging.getLogger(__name__)


class Witness:
    """열기 증명: "커밋된 다항식이 z에서 y로 평가된다"는 증거.

    속성:
        point: 몫 다항식 (p(x) - y) / (x - z)의 커밋먼트 (G1 점)
        z: 평가 점
        y: 주장하는 평가값 p(z)
    """

    __slots__ = ("point", "z", "y")

    def __init__(self, point, z, y):
        self.point = point
        self.z = z
        self.y = y

    def __repr__(self):
        return f"Witness(z={int(self.z)}, y={int(self.y)})"


def setup(n, curve=BN128, randomness=None):
    """공개 파라미터를 생성한다 (단일 참가자 trusted setup).

    실제 배포용 세리머니가 아니다. 자세한 내용은 srs 모듈 참고.

    Args:
        n: 최대 다항식 길이
        curve: 곡선 (기본값: BN128)
        randomness: 비밀 값 s를 뽑을 난수원 (None이면 secrets)

    Returns:
        PublicParams
    """
    return generate_public_params(n, curve=curve, randomness=randomness)


def _checked(pp, poly):
    """길이를 확인하고 계수를 곡선의 스칼라 필드로 맞춘다."""
    if len(poly) != pp.n:
        raise LengthMismatchError(
            f"다항식 길이 {len(poly)}가 파라미터 길이 n={pp.n}과 다릅니다"
        )
    if poly.field is not pp.curve.field:
        poly = Polynomial(poly.coeffs, pp.curve.field)
    return poly


def _msm(pp, poly):
    """다중 스칼라 곱: Σ coeffs[i] · g1_elements[i] (항등원부터 누적)."""
    curve = pp.curve
    result = curve.Z1
    for g1_element, coeff in zip(pp.g1_elements, poly.coeffs):
        if coeff == 0:
            continue
        result = curve.add(result, curve.mul(g1_element, coeff))
    return result


def commit(pp, poly):
    """다항식을 KZG 커밋한다.

    C = Σᵢ cᵢ · [sⁱ]₁ = p(s) · G1

    Args:
        pp: 공개 파라미터
        poly: 길이가 정확히 pp.n인 다항식

    Returns:
        G1 점: 커밋먼트 C

    Raises:
        LengthMismatchError: len(poly) != pp.n

    예시:
        >>> p = Polynomial([FR(1), FR(2), FR(3)])  # 1 + 2x + 3x²
        >>> C = commit(pp, p)  # (1 + 2s + 3s²)·G1
    """
    return _msm(pp, _checked(pp, poly))


def create_witness(pp, poly, z):
    """p(z) = y 에 대한 열기 증명을 만든다.

    분자 p(x) - y 는 상수항만 y만큼 줄인 다항식이고,
    제수 x - z 는 길이 n + 1 버퍼에 [-z, 1, 0, ...]으로 담는다.
    (용량 제한 곱셈이 제수의 마지막 슬롯을 건너뛰므로 한 칸 더 길다.)

    Args:
        pp: 공개 파라미터
        poly: 길이 pp.n인 다항식
        z: 평가 점 (정수 또는 필드 원소)

    Returns:
        Witness

    Raises:
        LengthMismatchError: len(poly) != pp.n
        IntegrityViolationError: 나머지가 0이 아닐 때

    예시:
        >>> p = Polynomial([FR(1), FR(2), FR(0)])  # 1 + 2x
        >>> w = create_witness(pp, p, FR(3))
        >>> w.y  # 7
    """
    poly = _checked(pp, poly)
    z = pp.curve.scalar(z)

    # y = p(z)
    y = poly.evaluate(z)

    # p(x) - y
    numerator = poly.with_coeff(0, poly.coeffs[0] - y)

    # (x - z)
    divisor = (
        Polynomial.zeros(pp.n + 1, poly.field)
        .with_coeff(0, -z)
        .with_coeff(1, 1)
    )

    # q(x) = (p(x) - y) / (x - z)
    quotient, remainder = numerator.divide(divisor)
    if not remainder.is_zero():
        raise IntegrityViolationError("열기 증명 생성 실패: 나머지가 0이 아닙니다")

    logger.debug("witness created: n=%d quotient degree=%s", pp.n, quotient.degree())
    return Witness(_msm(pp, quotient), z, y)


def verify(pp, witness, commitment):
    """KZG 열기 증명을 검증한다.

    e(π, [s]₂ - [z]₂) == e(C - [y]₁, [1]₂)

    Args:
        pp: 공개 파라미터 (n ≥ 2, [s]₂가 필요)
        witness: 열기 증명
        commitment: 다항식 커밋먼트 C

    Returns:
        bool: 검증 성공 여부 (π 또는 C가 G1 위의 점이 아니면 False)

    Raises:
        LengthMismatchError: pp.n < 2 ([s]₂가 없음)
    """
    if pp.n < 2:
        raise LengthMismatchError(f"검증에는 n ≥ 2인 파라미터가 필요합니다: n={pp.n}")
    curve = pp.curve

    # 곡선 밖의 점은 증명으로 받아들이지 않는다
    if not (curve.is_on_g1(witness.point) and curve.is_on_g1(commitment)):
        logger.debug("verify rejected: point not on G1")
        return False

    # LHS: e(π, [s - z]₂)
    s_g2 = pp.g2_elements[1]
    z_g2 = curve.mul(pp.gen2, witness.z)
    s_minus_z = curve.sub(s_g2, z_g2)
    lhs = curve.pairing(witness.point, s_minus_z)

    # RHS: e(C - [y]₁, G2)
    y_g1 = curve.mul(pp.gen1, witness.y)
    c_minus_y = curve.sub(commitment, y_g1)
    rhs = curve.pairing(c_minus_y, pp.gen2)

    return lhs == rhs


class KZGScheme:
    """공개 파라미터를 들고 있는 장수명 핸들.

    Uninitialized → Parametrized(pp) 한 번만 전이하며, 이후의
    commit / create_witness / verify는 모두 읽기 전용 연산이다.

    예시:
        >>> kzg = KZGScheme.setup(3, randomness=SeededRandomness(5))
        >>> p = Polynomial([FR(-4), FR(0), FR(1)])
        >>> kzg.verify(kzg.create_witness(p, 2), kzg.commit(p))  # True
    """

    def __init__(self, pp):
        self.pp = pp

    @classmethod
    def setup(cls, n, curve=BN128, randomness=None):
        return cls(setup(n, curve=curve, randomness=randomness))

    @property
    def curve(self):
        return self.pp.curve

    def commit(self, poly):
        return commit(self.pp, poly)

    def create_witness(self, poly, z):
        return create_witness(self.pp, poly, z)

    def verify(self, witness, commitment):
        return verify(self.pp, witness, commitment)
