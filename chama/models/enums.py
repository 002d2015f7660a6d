from enum import Enum

class TransactionType(str, Enum):
    deposit = "deposit"
    withdraw = "withdraw"
    loan_disbursement = "loan_disbursement"
    loan_repayment = "loan_repayment"

class LoanStatus(str, Enum):
    active = "active"
    paid = "paid"
    overdue = "overdue"

class ActivityType(str, Enum):
    deposit = "deposit"
    withdraw = "withdraw"
    loan_approved = "loan_approved"
    loan_repayment = "loan_repayment"
    member_added = "member_added"
    member_deleted = "member_deleted"
