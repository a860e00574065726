"""
End-to-end bookkeeping flow through the API.
"""


def test_customer_bill_payment_flow(client):
    response = client.post('/api/customers', json={'customerName': 'Alice'})
    assert response.status_code == 201
    customer = response.json()['customer']
    assert customer['customerId'] == 'CUST001'
    assert customer['toBePaid'] == 0

    response = client.post('/api/bills', json={
        'billNumber': '1001',
        'customerId': 'CUST001',
        'billAmount': 500,
        'billDate': '2024-01-01',
    })
    assert response.status_code == 201
    customer = client.get('/api/customers/CUST001').json()['customer']
    assert customer['toBePaid'] == 500

    response = client.post('/api/payments', json={'customerId': 'CUST001', 'payingAmount': 200})
    assert response.status_code == 201
    customer = client.get('/api/customers/CUST001').json()['customer']
    assert customer['paidAmount'] == 200
    # payments do not reduce the stored running balance
    assert customer['toBePaid'] == 500

    statement = client.get('/api/customers/CUST001/statement').json()['statement']
    assert statement['balance'] == 300


def test_json_files_hold_the_collections(client, store):
    client.post('/api/customers', json={'customerName': 'Alice'})
    client.post('/api/bills', json={
        'billNumber': '0042', 'customerId': 'CUST001', 'billAmount': 12.5, 'billDate': '2024-06-01',
    })

    assert [c['customerId'] for c in store.read_all('customers')] == ['CUST001']
    assert store.read_all('bills')[0]['billNumber'] == '0042'
    assert store.read_all('customers')[0]['bills'] == ['0042']
