"""Payment method ids shared across tests."""

from paysolver.config import POINTS_METHOD_ID

POINTS = POINTS_METHOD_ID
CARD20 = "CARD20"
CARD10 = "CARD10"
MZYSK = "mZysk"
BOS = "BosBankrut"
