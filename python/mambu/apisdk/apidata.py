"""
names used to build Mambu API requests:  URL path endpoints and request parameter names
"""

# URL path endpoints
CLIENTS = "clients"
GROUPS = "groups"
LOANS = "loans"
SAVINGS = "savings"
TRANSACTIONS = "transactions"
REPAYMENTS = "repayments"
BRANCHES = "branches"
CENTRES = "centres"
USERS = "users"
CURRENCIES = "currencies"
TRANSACTION_CHANNELS = "transactionchannels"
TASKS = "tasks"
LOANPRODUCTS = "loanproducts"
SAVINGSPRODUCTS = "savingsproducts"
DOCUMENTS = "documents"
CUSTOM_FIELD_SETS = "customfieldsets"
CUSTOM_FIELDS = "customfields"
CUSTOM_INFORMATION = "custominformation"
GLACCOUNTS = "glaccounts"
GLJOURNALENTRIES = "gljournalentries"
INDICATORS = "indicators"
VIEWS = "views"
ACTIVITIES = "activities"
IMAGES = "images"
SEARCH = "search"

# request parameters
FULL_DETAILS = "fullDetails"
TYPE = "type"
NOTES = "notes"
OFFSET = "offset"
LIMIT = "limit"
DUE_FROM = "dueFrom"
DUE_TO = "dueTo"
ACTIVE = "active"
FIRST_NAME = "firstName"
LAST_NAME = "lastName"
BIRTH_DATE = "birthdate"
BRANCH_ID = "branchId"
CENTRE_ID = "centreId"
CREDIT_OFFICER_USER_NAME = "creditOfficerUsername"
ACCOUNT_STATE = "accountState"
AMOUNT = "amount"
DATE = "date"
FIRST_REPAYMENT_DATE = "firstRepaymentDate"
PAYMENT_METHOD = "method"
RECEIPT_NUMBER = "receiptNumber"
BANK_NUMBER = "bankNumber"
BANK_ACCOUNT_NUMBER = "bankAccountNumber"
BANK_ROUTING_NUMBER = "bankRoutingNumber"
CHECK_NUMBER = "checkNumber"
TITLE = "title"
USERNAME = "username"
DESCRIPTION = "description"
DUE_DATE = "dueDate"
CLIENT_ID = "clientID"
GROUP_ID = "groupID"
STATUS = "status"
TASK_STATUS = "taskStatus"
CUSTOM_FIELD_ID = "customFieldID"

# values for the "type" parameter of transaction posts
TYPE_APPROVAL = "APPROVAL"
TYPE_UNDO_APPROVAL = "UNDO_APPROVAL"
TYPE_REJECT = "REJECT"
TYPE_DISBURSEMENT = "DISBURSMENT"
TYPE_REPAYMENT = "REPAYMENT"
TYPE_DEPOSIT = "DEPOSIT"
TYPE_WITHDRAWAL = "WITHDRAWAL"

# value of the fullDetails parameter when full details are requested
TRUE = "true"
