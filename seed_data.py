import uuid
from datetime import date

# بيانات أولية ثابتة للتجربة

users = [
    {
        'id': uuid.UUID('410544b2-4001-4271-9855-fec4b6a6442a'),
        'name': 'User',
        'email': 'user@nextmail.com',
        'password': '123456',
    },
]

customers = [
    {
        'id': uuid.UUID('3958dc9e-712f-4377-85e9-fec4b6a6442a'),
        'name': 'Delba de Oliveira',
        'email': 'delba@oliveira.com',
        'image_url': '/customers/delba-de-oliveira.png',
    },
    {
        'id': uuid.UUID('3958dc9e-742f-4377-85e9-fec4b6a6442a'),
        'name': 'Lee Robinson',
        'email': 'lee@robinson.com',
        'image_url': '/customers/lee-robinson.png',
    },
    {
        'id': uuid.UUID('3958dc9e-737f-4377-85e9-fec4b6a6442a'),
        'name': 'Hector Simpson',
        'email': 'hector@simpson.com',
        'image_url': '/customers/hector-simpson.png',
    },
    {
        'id': uuid.UUID('50ca3e18-62cd-11ee-8c99-0242ac120002'),
        'name': 'Steven Tey',
        'email': 'steven@tey.com',
        'image_url': '/customers/steven-tey.png',
    },
    {
        'id': uuid.UUID('3958dc9e-787f-4377-85e9-fec4b6a6442a'),
        'name': 'Steph Dietz',
        'email': 'steph@dietz.com',
        'image_url': '/customers/steph-dietz.png',
    },
    {
        'id': uuid.UUID('76d65c26-f784-44a2-ac19-586678f7c2f2'),
        'name': 'Michael Novotny',
        'email': 'michael@novotny.com',
        'image_url': '/customers/michael-novotny.png',
    },
    {
        'id': uuid.UUID('d6e15727-9fe1-4961-8c5b-ea44a9bd81aa'),
        'name': 'Evil Rabbit',
        'email': 'evil@rabbit.com',
        'image_url': '/customers/evil-rabbit.png',
    },
    {
        'id': uuid.UUID('126eed9c-c90c-4ef6-a4a8-fcf7408d3c66'),
        'name': 'Emil Kowalski',
        'email': 'emil@kowalski.com',
        'image_url': '/customers/emil-kowalski.png',
    },
    {
        'id': uuid.UUID('cc27c14a-0acf-4f4a-a6c9-d45682c144b9'),
        'name': 'Amy Burns',
        'email': 'amy@burns.com',
        'image_url': '/customers/amy-burns.png',
    },
    {
        'id': uuid.UUID('13d07535-c59e-4157-a011-f8d2ef4e0cbb'),
        'name': 'Balazs Orban',
        'email': 'balazs@orban.com',
        'image_url': '/customers/balazs-orban.png',
    },
]

# (رقم العميل، المبلغ بالسنتات، الحالة، التاريخ)
_invoice_rows = [
    (0, 15795, 'pending', date(2022, 12, 6)),
    (1, 20348, 'pending', date(2022, 11, 14)),
    (4, 3040, 'paid', date(2022, 10, 29)),
    (3, 44800, 'paid', date(2023, 9, 10)),
    (5, 34577, 'pending', date(2023, 8, 5)),
    (7, 54246, 'pending', date(2023, 7, 16)),
    (6, 666, 'pending', date(2023, 6, 27)),
    (3, 32545, 'paid', date(2023, 6, 9)),
    (4, 1250, 'paid', date(2023, 6, 17)),
    (5, 8546, 'paid', date(2023, 6, 7)),
    (1, 500, 'paid', date(2023, 8, 19)),
    (5, 8945, 'paid', date(2023, 6, 3)),
    (2, 8945, 'paid', date(2023, 6, 18)),
    (0, 8945, 'paid', date(2023, 10, 4)),
    (2, 1000, 'paid', date(2022, 6, 5)),
]

# معرفات ثابتة حتى لا تتكرر الفواتير عند إعادة التشغيل
_INVOICE_NAMESPACE = uuid.UUID('4f1f2a6e-2f0a-4b8e-9a53-3b1d0f6c7e21')

invoices = [
    {
        'id': uuid.uuid5(_INVOICE_NAMESPACE, str(index)),
        'customer_id': customers[customer]['id'],
        'amount': amount,
        'status': status,
        'date': invoice_date,
    }
    for index, (customer, amount, status, invoice_date) in enumerate(_invoice_rows)
]

revenue = [
    {'month': 'Jan', 'revenue': 2000},
    {'month': 'Feb', 'revenue': 1800},
    {'month': 'Mar', 'revenue': 2200},
    {'month': 'Apr', 'revenue': 2500},
    {'month': 'May', 'revenue': 2300},
    {'month': 'Jun', 'revenue': 3200},
    {'month': 'Jul', 'revenue': 3500},
    {'month': 'Aug', 'revenue': 3700},
    {'month': 'Sep', 'revenue': 2500},
    {'month': 'Oct', 'revenue': 2800},
    {'month': 'Nov', 'revenue': 3000},
    {'month': 'Dec', 'revenue': 4800},
]
