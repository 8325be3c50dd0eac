from afm_checker.adapters.gsis_adapter import GsisAdapter
from afm_checker.config import Config
from afm_checker.services.lookup_service import run_lookup
import sys

cfg = {k: getattr(Config, k) for k in dir(Config) if k.isupper()}
adapter = GsisAdapter.from_config(cfg)
for afm in sys.argv[1:] or ["094014201"]:
    print(afm)
    print(run_lookup({"afm_for": afm, "afm_from": cfg["AFM_CALLED_BY"] or None}, adapter))
    print('-' * 40)
