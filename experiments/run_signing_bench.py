import argparse
import os
from pathlib import Path

from edsign.hashing import seed_from_passphrase
from edsign.service import SigningService
from experiments.metrics import append_csv, percentile, timed
from experiments.scenarios import SCENARIOS

OUT = Path("experiments/results")
CSV_PATH = OUT / "signing_bench.csv"

def run_scenario(service, name, n):
    size = SCENARIOS[name]["message_bytes"]
    message = os.urandom(size)
    keys = service.derive_keypair(seed_from_passphrase(f"bench:{name}"))

    derive_ms, sign_ms, verify_ms = [], [], []
    for i in range(n):
        _, ms = timed(lambda: service.derive_keypair(keys.seed))
        derive_ms.append(ms)
        sig, ms = timed(lambda: service.sign(message, keys.private_key))
        sign_ms.append(ms)
        ok, ms = timed(lambda: service.verify(message, sig, keys.public_key))
        verify_ms.append(ms)
        if not ok:
            raise RuntimeError(f"signature failed to verify in scenario {name}")

    return {
        "scenario": name,
        "message_bytes": size,
        "trials": n,
        "derive_p50_ms": round(percentile(derive_ms, 50), 3),
        "sign_p50_ms": round(percentile(sign_ms, 50), 3),
        "sign_p95_ms": round(percentile(sign_ms, 95), 3),
        "verify_p50_ms": round(percentile(verify_ms, 50), 3),
        "verify_p95_ms": round(percentile(verify_ms, 95), 3),
    }

def main(n=50, scenarios=None, csv_path=CSV_PATH):
    service = SigningService()
    rows = []
    for name in scenarios or SCENARIOS:
        row = run_scenario(service, name, n)
        append_csv(row, path=csv_path)
        rows.append(row)
        print(row)
    return rows

if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("--n", type=int, default=50)
    p.add_argument("--scenario", action="append", choices=sorted(SCENARIOS))
    args = p.parse_args()
    main(n=args.n, scenarios=args.scenario)
