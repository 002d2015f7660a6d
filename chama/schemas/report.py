from chama.schemas.base import CamelModel

class ReportSummary(CamelModel):
    total_deposits: float
    total_withdrawals: float
    net_savings: float
    transaction_count: int
