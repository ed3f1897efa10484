"""Fixed province/district/ward seed catalog for Vietnam."""

from __future__ import annotations

from typing import Final

from address_catalog.core.models import Locality, Region, Subregion

SEED_REGIONS: Final[tuple[Region, ...]] = (
    Region("HCM", "TP. Hồ Chí Minh"),
    Region("HN", "Hà Nội"),
    Region("DN", "Đà Nẵng"),
    Region("CT", "Cần Thơ"),
    Region("HP", "Hải Phòng"),
)

SEED_SUBREGIONS: Final[tuple[Subregion, ...]] = (
    # Ho Chi Minh City
    Subregion("HCM-Q1", "Quận 1", "HCM"),
    Subregion("HCM-Q2", "Quận 2", "HCM"),
    Subregion("HCM-Q3", "Quận 3", "HCM"),
    Subregion("HCM-Q4", "Quận 4", "HCM"),
    Subregion("HCM-Q5", "Quận 5", "HCM"),
    Subregion("HCM-Q7", "Quận 7", "HCM"),
    Subregion("HCM-Q10", "Quận 10", "HCM"),
    Subregion("HCM-TB", "Quận Tân Bình", "HCM"),
    Subregion("HCM-BT", "Quận Bình Thạnh", "HCM"),
    Subregion("HCM-PN", "Quận Phú Nhuận", "HCM"),
    # Hanoi
    Subregion("HN-HK", "Quận Hoàn Kiếm", "HN"),
    Subregion("HN-BD", "Quận Ba Đình", "HN"),
    Subregion("HN-DD", "Quận Đống Đa", "HN"),
    Subregion("HN-HBT", "Quận Hai Bà Trưng", "HN"),
    Subregion("HN-CG", "Quận Cầu Giấy", "HN"),
    # Da Nang
    Subregion("DN-HC", "Quận Hải Châu", "DN"),
    Subregion("DN-TK", "Quận Thanh Khê", "DN"),
    Subregion("DN-SH", "Quận Sơn Trà", "DN"),
    # Can Tho
    Subregion("CT-NK", "Quận Ninh Kiều", "CT"),
    Subregion("CT-BT", "Quận Bình Thủy", "CT"),
    # Hai Phong
    Subregion("HP-HY", "Quận Hồng Bàng", "HP"),
    Subregion("HP-LC", "Quận Lê Chân", "HP"),
)

SEED_LOCALITIES: Final[tuple[Locality, ...]] = (
    Locality("HCM-Q1-BN", "Phường Bến Nghé", "HCM-Q1"),
    Locality("HCM-Q1-BT", "Phường Bến Thành", "HCM-Q1"),
    Locality("HCM-Q1-NT", "Phường Nguyễn Thái Bình", "HCM-Q1"),
    Locality("HCM-Q1-CL", "Phường Cô Giang", "HCM-Q1"),
    Locality("HCM-Q2-TM", "Phường Thảo Điền", "HCM-Q2"),
    Locality("HCM-Q2-AP", "Phường An Phú", "HCM-Q2"),
    Locality("HCM-Q2-AK", "Phường An Khánh", "HCM-Q2"),
    Locality("HCM-Q3-P1", "Phường 1", "HCM-Q3"),
    Locality("HCM-Q3-P2", "Phường 2", "HCM-Q3"),
    Locality("HCM-Q3-P3", "Phường 3", "HCM-Q3"),
    Locality("HCM-Q7-TP", "Phường Tân Phú", "HCM-Q7"),
    Locality("HCM-Q7-TQ", "Phường Tân Quy", "HCM-Q7"),
    Locality("HCM-Q7-TH", "Phường Tân Hưng", "HCM-Q7"),
    Locality("HN-HK-HT", "Phường Hàng Trống", "HN-HK"),
    Locality("HN-HK-HB", "Phường Hàng Bạc", "HN-HK"),
    Locality("HN-HK-LT", "Phường Lý Thái Tổ", "HN-HK"),
    Locality("HN-BD-QT", "Phường Quán Thánh", "HN-BD"),
    Locality("HN-BD-NB", "Phường Ngọc Hà", "HN-BD"),
    Locality("DN-HC-TT", "Phường Thạch Thang", "DN-HC"),
    Locality("DN-HC-HT", "Phường Hải Châu 1", "DN-HC"),
    Locality("CT-NK-XK", "Phường Xuân Khánh", "CT-NK"),
    Locality("CT-NK-TH", "Phường Tân Hòa", "CT-NK"),
)
