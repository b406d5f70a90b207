"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides the shared schema fixtures.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local schemaplane package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of schemaplane modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("schemaplane"):
        del sys.modules[module_name]

from schemaplane.schema.models import ParsedSchema  # noqa: E402
from schemaplane.schema.parser import parse  # noqa: E402

MINI_SCHEMA = """
generator client {
  provider = "prisma-client-js"
}

datasource db {
  provider = "postgresql"
  url      = env("DATABASE_URL")
}

enum WorkOrderStatus {
  PENDING
  IN_PROGRESS
  COMPLETED
  CANCELLED
}

enum Priority {
  LOW
  MEDIUM
  HIGH
  CRITICAL
}

model Company {
  id        Int      @id @default(autoincrement())
  name      String
  cuit      String?  @unique
  email     String?
  createdAt DateTime @default(now())
  updatedAt DateTime @updatedAt
  isActive  Boolean  @default(true)

  areas      Area[]
  workOrders WorkOrder[]
  users      UserOnCompany[]

  @@map("companies")
}

model User {
  id        Int      @id @default(autoincrement())
  email     String   @unique
  name      String
  password  String
  createdAt DateTime @default(now())
  updatedAt DateTime @updatedAt

  companies   UserOnCompany[]
  workOrders  WorkOrder[]

  @@index([email])
}

model UserOnCompany {
  id        Int     @id @default(autoincrement())
  userId    Int
  companyId Int

  user    User    @relation(fields: [userId], references: [id])
  company Company @relation(fields: [companyId], references: [id])

  @@unique([userId, companyId])
  @@index([companyId])
}

model Area {
  id        Int     @id @default(autoincrement())
  name      String
  companyId Int

  company Company @relation(fields: [companyId], references: [id])
  sectors Sector[]

  @@index([companyId])
}

model Sector {
  id     Int    @id @default(autoincrement())
  name   String
  areaId Int
  code   String

  area Area @relation(fields: [areaId], references: [id])

  @@index([areaId])
}

model WorkOrder {
  id          Int              @id @default(autoincrement())
  title       String
  description String?
  status      WorkOrderStatus  @default(PENDING)
  priority    Priority         @default(MEDIUM)
  companyId   Int
  assigneeId  Int?
  createdAt   DateTime         @default(now())
  updatedAt   DateTime         @updatedAt
  dueDate     DateTime?

  company  Company @relation(fields: [companyId], references: [id])
  assignee User?   @relation(fields: [assigneeId], references: [id], onDelete: SetNull)

  @@index([companyId])
  @@index([assigneeId])
  @@index([status])
}

model Machine {
  id          Int     @id @default(autoincrement())
  name        String
  companyId   Int
  serialNumber String?
  location    String?

  @@index([companyId])
}
"""

SCHEMA_WITH_ISSUES = """
model BadModel {
  id        Int    @id @default(autoincrement())
  name      String
  email     String
  companyId Int
  parentId  Int

  parent    BadModel  @relation("SelfRef", fields: [parentId], references: [id])
  children  BadModel[] @relation("SelfRef")
}

model OrphanRelation {
  id        Int    @id @default(autoincrement())
  targetId  Int
  slug      String

  target NonExistentModel @relation(fields: [targetId], references: [id])
}

model NoTimestamps {
  id          Int    @id @default(autoincrement())
  companyId   Int
  name        String
  description String
  status      String
}
"""

# Parent/child pair that passes every rule
PAIR_SCHEMA = """
model Parent {
  id       Int     @id @default(autoincrement())
  children Child[]
}

model Child {
  id       Int    @id @default(autoincrement())
  parentId Int
  parent   Parent @relation(fields: [parentId], references: [id])

  @@index([parentId])
}
"""


@pytest.fixture
def mini_schema() -> ParsedSchema:
    return parse(MINI_SCHEMA)


@pytest.fixture
def issues_schema() -> ParsedSchema:
    return parse(SCHEMA_WITH_ISSUES)


@pytest.fixture
def pair_schema() -> ParsedSchema:
    return parse(PAIR_SCHEMA)


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Project root with the mini schema at the default location."""
    monkeypatch.setattr("schemaplane.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "global.yaml")
    root = tmp_path / "project"
    (root / "prisma").mkdir(parents=True)
    (root / ".git").mkdir()
    (root / "prisma" / "schema.prisma").write_text(MINI_SCHEMA)
    return root


@pytest.fixture
def mini_schema_text() -> str:
    return MINI_SCHEMA


@pytest.fixture
def issues_schema_text() -> str:
    return SCHEMA_WITH_ISSUES


@pytest.fixture
def pair_schema_text() -> str:
    return PAIR_SCHEMA
