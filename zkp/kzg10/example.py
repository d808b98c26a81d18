"""
KZG10 E2E 데모: p(x) = x³ - 2x² - 4 를 z = 3 에서 열기
========================================================

이 스크립트는 KZG 커밋먼트 스킴의 전체 흐름을 시연한다.

실행:
    python -m zkp.kzg10.example

흐름:
    1. 공개 파라미터 생성 (trusted setup)
    2. 다항식 커밋
    3. 열기 증명 생성
    4. 증명 검증
    5. 변조된 증명 거절
"""

from zkp.kzg10.field import BN128
from zkp.kzg10.kzg import KZGScheme, Witness
from zkp.kzg10.polynomial import Polynomial
from zkp.kzg10.srs import SeededRandomness


def main():
    FR = BN128.field
    n = 4

    print("=" * 60)
    print("  KZG10 Polynomial Commitment Demo")
    print("  다항식: x³ - 2x² - 4, 평가 점 z = 3")
    print("=" * 60)

    # ── 1. 공개 파라미터 ──
    print("\n[1] 공개 파라미터 생성 (trusted setup)...")
    print("    주의: 단일 참가자 시뮬레이션 (실제 배포 금지)")
    kzg = KZGScheme.setup(n, curve=BN128, randomness=SeededRandomness(12345))
    print(f"    곡선: {kzg.curve.name}")
    print(f"    G1 powers 수: {len(kzg.pp.g1_elements)}")
    print(f"    G2 powers 수: {len(kzg.pp.g2_elements)}")

    # ── 2. 커밋 ──
    print("\n[2] 다항식 커밋...")
    poly = Polynomial([FR(-4), FR(0), FR(-2), FR(1)])
    commitment = kzg.commit(poly)
    print(f"    차수: {poly.degree()}")
    print(f"    C (affine x): {kzg.curve.to_affine(commitment)[0]}")

    # ── 3. 열기 증명 ──
    print("\n[3] 열기 증명 생성...")
    z = FR(3)
    witness = kzg.create_witness(poly, z)
    print(f"    y = p({int(z)}) = {int(witness.y)}")

    # ── 4. 검증 ──
    print("\n[4] 증명 검증...")
    ok = kzg.verify(witness, commitment)
    print(f"    결과: {'✓ 통과' if ok else '✗ 실패'}")

    # ── 5. 변조 ──
    print("\n[5] 변조된 평가값으로 검증...")
    forged = Witness(witness.point, witness.z, witness.y + FR(1))
    rejected = not kzg.verify(forged, commitment)
    print(f"    y' = {int(forged.y)} → {'✓ 거절됨' if rejected else '✗ 통과됨'}")

    print("\n" + "=" * 60)
    return ok and rejected


if __name__ == "__main__":
    main()
