import time
from fastapi import APIRouter, Depends, Response
from sqlmodel import Session, select

from chama.database import get_session
from chama.models.member import Member
from chama.models.transaction import Transaction
from chama.schemas.report import ReportSummary
from chama.utils.stats import report_summary

router = APIRouter(prefix="/api/reports", tags=["reports"])

CSV_HEADER = "Date,Member,Type,Amount,Note"


def _quoted(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def transactions_csv(session: Session) -> str:
    names = {m.id: m.name for m in session.exec(select(Member)).all()}
    lines = [CSV_HEADER]
    for t in session.exec(select(Transaction)).all():
        lines.append(",".join([
            t.date.isoformat(),
            _quoted(names.get(t.member_id, "Unknown")),
            t.type.value,
            _number(t.amount),
            _quoted(t.note),
        ]))
    return "\n".join(lines) + "\n"


@router.get("/export")
def export_transactions(session: Session = Depends(get_session)):
    filename = f"transactions-{int(time.time() * 1000)}.csv"
    return Response(
        content=transactions_csv(session),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.get("/summary", response_model=ReportSummary)
def get_report_summary(session: Session = Depends(get_session)):
    return report_summary(session)
