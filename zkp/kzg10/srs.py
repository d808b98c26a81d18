"""
KZG10 공개 파라미터 (Structured Reference String)
===================================================

커밋먼트/증명/검증이 공유하는 공개 파라미터를 생성한다.

**PublicParams**:
  비밀 값 s ("toxic waste")로부터 만든 생성자의 거듭제곱 벡터.

  PublicParams = {
      n:           지원하는 최대 다항식 길이
      gen1, gen2:  G1, G2 생성자
      g1_elements: [G1, s·G1, s²·G1, ..., s^(n-1)·G1]
      g2_elements: [G2, s·G2, s²·G2, ..., s^(n-1)·G2]
  }

  두 벡터의 길이는 정확히 n이다. 생성 후에는 읽기 전용이며
  여러 호출자/스레드가 동시에 공유해도 안전하다.

**보안 경고**:
  여기의 setup은 한 사람이 s를 뽑고 버리는 단일 참가자 시뮬레이션이다.
  s를 아는 사람은 임의의 거짓 증명을 만들 수 있으므로 실제 배포에는
  절대 사용하면 안 된다. 실제 시스템에서는 MPC 세리머니로 생성한다.

**난수원 (randomness source)**:
  randbelow(k) → [0, k) 정수를 제공하는 객체면 무엇이든 주입할 수 있다.
  기본값은 secrets 모듈이다. SeededRandomness는 테스트/데모용
  결정론적 대체물이다.

사용 예시:
    >>> pp = generate_public_params(4, randomness=SeededRandomness(42))
    >>> len(pp.g1_elements)  # 4
"""

import hashlib
import logging
import secrets

from zkp.kzg10.field import BN128, powers

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────
# 난수원
# ─────────────────────────────────────────────────────────────────────

class SeededRandomness:
    """seed로부터 결정론적으로 정수를 뽑는 난수원 (교육/테스트용).

    i번째 추출값 = SHA-256(str(seed) || ":" || i) mod k

    같은 seed면 같은 순서의 값이 나온다. 예측 가능하므로
    실제 setup에 쓰면 안 된다.
    """

    def __init__(self, seed):
        self.seed = seed
        self.counter = 0

    def randbelow(self, k):
        h = hashlib.sha256(f"{self.seed}:{self.counter}".encode()).digest()
        self.counter += 1
        return int.from_bytes(h, "big") % k


# ─────────────────────────────────────────────────────────────────────
# 공개 파라미터
# ─────────────────────────────────────────────────────────────────────

class PublicParams:
    """KZG10 공개 파라미터 (읽기 전용).

    속성:
        curve: 사용하는 곡선 (Curve)
        n: 최대 다항식 길이
        gen1, gen2: G1, G2 생성자
        g1_elements: (G1, s·G1, ..., s^(n-1)·G1) tuple
        g2_elements: (G2, s·G2, ..., s^(n-1)·G2) tuple
    """

    __slots__ = ("curve", "n", "gen1", "gen2", "g1_elements", "g2_elements")

    def __init__(self, curve, n, gen1, gen2, g1_elements, g2_elements):
        g1_elements = tuple(g1_elements)
        g2_elements = tuple(g2_elements)
        if len(g1_elements) != n or len(g2_elements) != n:
            raise ValueError(
                f"거듭제곱 벡터 길이가 n={n}과 다릅니다: "
                f"g1={len(g1_elements)}, g2={len(g2_elements)}"
            )
        object.__setattr__(self, "curve", curve)
        object.__setattr__(self, "n", n)
        object.__setattr__(self, "gen1", gen1)
        object.__setattr__(self, "gen2", gen2)
        object.__setattr__(self, "g1_elements", g1_elements)
        object.__setattr__(self, "g2_elements", g2_elements)

    def __setattr__(self, name, value):
        raise AttributeError("PublicParams는 생성 후 수정할 수 없습니다")

    def __repr__(self):
        return f"PublicParams(curve={self.curve.name}, n={self.n})"


def generate_public_params(n, curve=BN128, randomness=None):
    """단일 참가자 trusted setup으로 공개 파라미터를 만든다.

    1. 비밀 값 s를 [1, r) 에서 균등하게 뽑는다 (r: 곡선 위수)
    2. [1, s, s², ..., s^(n-1)] 계산
    3. 각 거듭제곱으로 G1, G2 생성자를 스칼라 곱
    4. s를 버린다 (함수 밖으로 나가지 않는 지역 변수)

    Args:
        n: 지원할 최대 다항식 길이 (≥ 1)
        curve: 사용할 곡선 (기본값: BN128)
        randomness: randbelow(k)를 가진 난수원 (기본값: secrets)

    Returns:
        PublicParams

    Raises:
        ValueError: n < 1

    예시:
        >>> pp = generate_public_params(3, randomness=SeededRandomness(1234))
        >>> pp.n  # 3
    """
    if n < 1:
        raise ValueError(f"n은 1 이상이어야 합니다: {n}")
    if randomness is None:
        randomness = secrets

    # toxic waste s (0은 제외)
    secret = curve.field(randomness.randbelow(curve.curve_order - 1) + 1)
    secret_powers = powers(secret, n)

    g1_elements = [curve.mul(curve.G1, p) for p in secret_powers]
    g2_elements = [curve.mul(curve.G2, p) for p in secret_powers]
    del secret, secret_powers

    logger.debug("public params generated: curve=%s n=%d", curve.name, n)
    return PublicParams(curve, n, curve.G1, curve.G2, g1_elements, g2_elements)
