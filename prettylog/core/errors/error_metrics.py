from typing import Any


class ErrorMetrics:
    """行処理中のエラーの収集と集約

    エラー種別ごとに件数と最初/最後の行番号だけを保持する。
    tail -f のような終わりのない入力でもメモリは増えない。
    """

    def __init__(self):
        self.errors: dict[str, dict[str, Any]] = {}

    def record_error(self, error_type: str, line_number: int, details: dict[str, Any] | None = None):
        """エラーを記録（details は最後の1件のみ保持）"""
        stat = self.errors.get(error_type)
        if stat is None:
            self.errors[error_type] = {
                "count": 1,
                "first_line": line_number,
                "last_line": line_number,
                "last_details": details or {},
            }
            return

        stat["count"] += 1
        stat["last_line"] = line_number
        stat["last_details"] = details or {}

    def count(self, error_type: str | None = None) -> int:
        if error_type is None:
            return sum(stat["count"] for stat in self.errors.values())
        stat = self.errors.get(error_type)
        return stat["count"] if stat else 0

    def get_error_stats(self) -> dict[str, dict]:
        """エラー統計を取得"""
        return {
            error_type: {
                "count": stat["count"],
                "first_line": stat["first_line"],
                "last_line": stat["last_line"],
            }
            for error_type, stat in self.errors.items()
        }

    def get_error_report(self) -> str:
        """エラーレポートを生成"""
        stats = self.get_error_stats()

        if not stats:
            return "No errors"

        report_lines = ["Error Report", "=" * 50]

        for error_type, stat in sorted(stats.items(), key=lambda x: x[1]["count"], reverse=True):
            report_lines.extend(
                [
                    f"\nError Type: {error_type}",
                    f"Count: {stat['count']}",
                    f"First: line {stat['first_line']}",
                    f"Last: line {stat['last_line']}",
                ]
            )

        return "\n".join(report_lines)
