import os
from dotenv import load_dotenv
load_dotenv()
# ---- Validate API ----
RISKGRAPH_API_URL = os.environ.get("RISKGRAPH_API_URL", "http://127.0.0.1:5000/validate")
RISKGRAPH_API_TIMEOUT_SEC = int(os.environ.get("RISKGRAPH_API_TIMEOUT_SEC", "15"))
RISKGRAPH_API_MAX_RETRIES = int(os.environ.get("RISKGRAPH_API_MAX_RETRIES", "3"))
RISKGRAPH_API_REQUESTS_PER_SEC = float(os.environ.get("RISKGRAPH_API_REQUESTS_PER_SEC", "2.0"))

# ---- Graph rendering ----
NODE_BASE_SIZE = 8
SIZE_DIVISOR = 15           # suspicion points per unit of node size
LABEL_LENGTH = 4            # trailing address characters shown on a node
LABEL_BASE_HEIGHT = 0.4

# ----- Logging -----
RISKGRAPH_LOG_LEVEL = os.environ.get("RISKGRAPH_LOG_LEVEL", "INFO")
