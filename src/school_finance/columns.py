"""Sheet names and column labels of the annual workbook.

Labels are matched exactly; anything not listed here is ignored, except on the
salary sheet where every extra column is part of the annual cost.
"""

STUDENTS_SHEET = "الطلبة"
SALARIES_SHEET = "الرواتب"
DONORS_SHEET = "الداعمين"
EXPENSES_SHEET = "المصاريف"

FULL_NAME = "الاسم الكامل"
NOTES = "ملاحظات"
NOTE = "ملاحظة"
AMOUNT = "المبلغ"
DATE = "التاريخ"

# students
GENDER = "الجنس"
LEVEL = "المستوى"
GROUP = "الفوج"
TEACHER = "الشيخ/الأستاذة"
SEASON_COLUMNS = ("الموسم 1", "الموسم 2", "الموسم 3", "الموسم 4")

# staff salaries
ROLE = "الدور"

# donors
PHONE = "رقم الهاتف"

# expenses
ITEM = "البيان"
EXPENSE_TYPE = "نوع المصروف"

STUDENT_HEADERS = [FULL_NAME, GENDER, LEVEL, GROUP, TEACHER, *SEASON_COLUMNS, NOTES]
DONOR_HEADERS = [FULL_NAME, PHONE, AMOUNT, DATE, NOTE]
EXPENSE_HEADERS = [ITEM, AMOUNT, DATE, EXPENSE_TYPE, NOTE]
