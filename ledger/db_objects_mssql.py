from sqlalchemy import text
from ledger.extensions import db

# Same rules as LoanService, for clients that talk to SQL Server directly.
# RAISERROR inside TRY jumps to CATCH, which rolls back and re-raises.
SP_LOAN_BORROW_SQL = r"""
CREATE OR ALTER PROCEDURE dbo.sp_Loan_Borrow
    @book_id INT,
    @reader_id INT
AS
BEGIN
    SET NOCOUNT ON;

    BEGIN TRY
        BEGIN TRAN;

        DECLARE @status VARCHAR(50);

        SELECT @status = status
        FROM dbo.books WITH (UPDLOCK, ROWLOCK)
        WHERE id = @book_id;

        IF @status IS NULL
            RAISERROR('book not found', 16, 1);

        IF NOT EXISTS (SELECT 1 FROM dbo.readers WHERE id = @reader_id)
            RAISERROR('reader not found', 16, 1);

        IF EXISTS (SELECT 1 FROM dbo.loans WITH (UPDLOCK) WHERE reader_id = @reader_id)
            RAISERROR('reader already has an active loan', 16, 1);

        IF @status = 'LOANED'
        BEGIN
            -- style 103 = dd/mm/yyyy
            DECLARE @due_text VARCHAR(10);
            SELECT @due_text = CONVERT(VARCHAR(10), due_date, 103)
            FROM dbo.loans
            WHERE book_id = @book_id;

            RAISERROR('book already loaned, due on %s', 16, 1, @due_text);
        END

        DECLARE @start_date DATETIME2 = SYSUTCDATETIME();
        DECLARE @due_date DATETIME2 = DATEADD(DAY, 7, @start_date);

        INSERT INTO dbo.loans (book_id, reader_id, start_date, due_date)
        VALUES (@book_id, @reader_id, @start_date, @due_date);

        DECLARE @loan_id INT = SCOPE_IDENTITY();

        UPDATE dbo.books SET status = 'LOANED' WHERE id = @book_id;

        COMMIT TRAN;

        SELECT @loan_id AS loan_id, @due_date AS due_date;
    END TRY
    BEGIN CATCH
        IF @@TRANCOUNT > 0 ROLLBACK TRAN;
        DECLARE @msg NVARCHAR(4000) = ERROR_MESSAGE();
        RAISERROR(@msg, 16, 1);
    END CATCH
END
"""

SP_LOAN_RETURN_SQL = r"""
CREATE OR ALTER PROCEDURE dbo.sp_Loan_Return
    @book_id INT
AS
BEGIN
    SET NOCOUNT ON;

    BEGIN TRY
        BEGIN TRAN;

        DELETE FROM dbo.loans WHERE book_id = @book_id;

        UPDATE dbo.books SET status = 'AVAILABLE' WHERE id = @book_id;

        COMMIT TRAN;
    END TRY
    BEGIN CATCH
        IF @@TRANCOUNT > 0 ROLLBACK TRAN;
        DECLARE @msg NVARCHAR(4000) = ERROR_MESSAGE();
        RAISERROR(@msg, 16, 1);
    END CATCH
END
"""

PROCEDURES = (
    ("sp_Loan_Borrow", SP_LOAN_BORROW_SQL),
    ("sp_Loan_Return", SP_LOAN_RETURN_SQL),
)


def install_procedures(conn):
    # CREATE OR ALTER must be alone in its batch
    for _name, sql in PROCEDURES:
        conn.execute(text(sql))


def ensure_db_objects_mssql(app) -> bool:
    with app.app_context():
        dialect = db.engine.dialect.name
        if dialect != "mssql":
            app.logger.info(f"[db_objects_mssql] dialect={dialect}, stored procedures skipped.")
            return False

        conn = db.engine.connect()
        trans = conn.begin()
        try:
            install_procedures(conn)
            trans.commit()
            app.logger.info("[db_objects_mssql] stored procedures ensured (sp_Loan_Borrow, sp_Loan_Return).")
        except Exception as e:
            trans.rollback()
            app.logger.error(f"[db_objects_mssql] failed: {e}")
            raise
        finally:
            conn.close()
    return True
