"""
Connection health check for pooled connections.
"""

from typing import Any


def health_check(conn: Any, test_query: str = "SELECT 1") -> bool:
    """
    Run *test_query* and return True if no exception.
    """
    cur = None
    try:
        cur = conn.cursor()
        cur.execute(test_query)
        cur.fetchone()
        return True
    except Exception:
        return False
    finally:
        if cur is not None:
            try:
                cur.close()
            except Exception:
                pass
