from fastapi import APIRouter, UploadFile, File
from fastapi.responses import HTMLResponse
from services.csv_ingest_service import ingest_csv

router = APIRouter()


@router.get("/upload", response_class=HTMLResponse)
def upload_page():
    return """
    <html>
        <body style="font-family: Arial; padding: 40px;">
            <h2>Upload Transactions CSV</h2>
            <p>Columns: timestamp, product_name, expiry_date, quantity,
               unit_price, channel, payment_method</p>
            <form action="/upload" method="post" enctype="multipart/form-data">
                <input type="file" name="file" accept=".csv" required>
                <button type="submit">Upload</button>
            </form>
            <br>
            <a href="/transactions">View discounted transactions</a>
        </body>
    </html>
    """


@router.post("/upload")
def upload_csv(file: UploadFile = File(...)):
    contents_bytes = file.file.read()

    try:
        contents = contents_bytes.decode("utf-8-sig")
    except UnicodeDecodeError:
        return {"success": False, "error": "File must be UTF-8 encoded CSV"}

    return ingest_csv(contents)
