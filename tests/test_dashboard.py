def test_empty_dashboard(client, admin_headers):
    response = client.get("/api/dashboard/stats", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "totalStudents": 0,
        "totalFaculty": 0,
        "feeCollection": "0.00",
        "feeDefaulters": 0,
    }


def test_dashboard_counts_paid_and_unpaid_fees(client, admin_headers, accountant_headers, school, make_student):
    students = [make_student() for _ in range(3)]
    structure = client.post(
        "/api/fee-structures",
        json={
            "programId": school["program"]["id"],
            "classId": school["class"]["id"],
            "amount": "500",
            "frequency": "quarterly",
        },
        headers=accountant_headers,
    ).json()

    fees = [
        (students[0], "500", "500", "paid"),
        (students[1], "300", "300", "paid"),
        (students[2], "200", "0", "unpaid"),
        (students[2], "400", "150", "partially paid"),
    ]
    for n, (student, amount, paid, fee_status) in enumerate(fees, start=1):
        response = client.post(
            "/api/fees",
            json={
                "studentId": student["id"],
                "feeStructureId": structure["id"],
                "challanId": f"CH-{n:03d}",
                "amount": amount,
                "paidAmount": paid,
                "dueDate": "2024-10-10",
                "status": fee_status,
            },
            headers=accountant_headers,
        )
        assert response.status_code == 201, response.text

    stats = client.get("/api/dashboard/stats", headers=accountant_headers).json()

    assert stats["totalStudents"] == 3
    assert stats["totalFaculty"] == 1
    assert stats["feeCollection"] == "800.00"
    assert stats["feeDefaulters"] == 1
