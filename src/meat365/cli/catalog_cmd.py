#!/usr/bin/env python3
"""
미트365 제품 스펙 CLI

Usage:
    meat365 parse 2-FP180001-2CM [...]
    meat365 import products.csv [--commit]
    meat365 products [--species P] [--storage F] [--trade-type 2] [--part 0001] [검색어 ...]
    meat365 dict-search 삼겹 [--type pork] [--merged]
    meat365 dict-lookup 0001 [--locale my]
    meat365 dict-stats
    meat365 override pork belly 0 --set note=인기 --set en="Pork Belly"
    meat365 overrides [--delete pork_belly_0]
    meat365 upload 2-FP180001-2CM photo.png --category approved [--type cross_section]
    meat365 media 2-FP180001 [--base] [--category approved]
"""

import argparse
import logging
import mimetypes
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


def _open_db(args):
    from meat365.db import SpecDB

    return SpecDB(Path(args.db)) if args.db else SpecDB()


def cmd_parse(args):
    """제품 코드 파싱 결과 표시"""
    from meat365.catalog import parse_peak_code
    from meat365.dictionary import get_part_names
    from meat365.locale import SPECIES_NAMES, STORAGE_NAMES, TRADE_TYPE_NAMES, resolve

    failed = 0
    for code in args.codes:
        parsed = parse_peak_code(code)
        if parsed is None:
            print(f"  [형식 불일치] {code}")
            failed += 1
            continue
        names = get_part_names(parsed.part_code, parsed.meat_type)
        print(f"  {code}")
        print(f"    거래: {resolve(args.locale, TRADE_TYPE_NAMES.get(parsed.trade_type, {})) or parsed.trade_type}"
              f"  보관: {resolve(args.locale, STORAGE_NAMES[parsed.storage])}"
              f"  축종: {resolve(args.locale, SPECIES_NAMES[parsed.species])}")
        print(f"    공급처: {parsed.supplier_code}  부위: {parsed.part_code} {resolve(args.locale, names) or '(사전에 없음)'}"
              f"  변형: {parsed.variant or '-'}")
        print(f"    기본 코드: {parsed.base_code}")

    if failed:
        sys.exit(1)


def cmd_import(args):
    """CSV 에서 제품 스펙 Import"""
    from meat365.catalog import import_rows, read_rows_csv
    from meat365.locale import SPECIES_NAMES, TRADE_TYPE_NAMES

    try:
        rows = read_rows_csv(args.csv)
    except OSError as e:
        print(f"파일 읽기 오류: {e}")
        sys.exit(1)

    result = import_rows(rows)

    print(f"=== Import 결과 ===")
    print(f"  제품: {len(result.products)} 건")
    print(f"  건너뜀 (코드 형식 불일치): {len(result.skipped)} 건")
    print(f"  제품 외 행: {result.not_products} 건\n")

    print("축종별:")
    for species, count in sorted(result.by_species.items()):
        print(f"  {SPECIES_NAMES[species]['ko']}: {count}")
    print("거래유형별:")
    for trade_type, count in sorted(result.by_trade_type.items()):
        label = TRADE_TYPE_NAMES.get(trade_type, {}).get("ko", trade_type)
        print(f"  {label}: {count}")

    if args.verbose_list:
        print()
        for spec in result.products:
            print(f"  {spec.peak_code}  {spec.names.ko or '-'} / {spec.names.en or '-'}  [{spec.unit}]")

    if not args.commit:
        print("\n(미리보기 - 저장하려면 --commit)")
        return

    db = _open_db(args)
    saved = db.save_product_specs(result.products)
    db.close()
    print(f"\n{saved} 건 저장 완료")


def cmd_products(args):
    """저장된 제품 목록 필터/검색"""
    from meat365.catalog import apply_filters
    from meat365.catalog.models import FilterState

    db = _open_db(args)
    records = db.get_product_specs()
    db.close()

    state = FilterState(
        trade_type=args.trade_type,
        species=args.species,
        storage=args.storage,
        part_code=args.part,
        supplier_code=args.supplier,
        search_query=" ".join(args.query),
    )
    results = apply_filters(records, state)

    if not results:
        print("조건에 맞는 제품이 없습니다.")
        return

    print(f"=== 제품 {len(results)} 건 ===\n")
    for spec in results:
        print(f"  {spec.peak_code}  {spec.names.ko or '-'}  {spec.names.th or ''}  {spec.names.en or ''}")


def _dictionary_map(args):
    from meat365.dictionary import MEAT_DATA_MAP, merged_meat_data_map

    if not getattr(args, "merged", False):
        return MEAT_DATA_MAP
    db = _open_db(args)
    overrides = db.get_meat_cut_overrides()
    db.close()
    return merged_meat_data_map(overrides)


def cmd_dict_search(args):
    """부위 사전 검색"""
    from meat365.dictionary import MEAT_TYPES, search_meat_cuts

    if args.type and args.type not in MEAT_TYPES:
        print(f"축종은 {', '.join(MEAT_TYPES)} 중 하나여야 합니다.")
        sys.exit(1)

    matches = search_meat_cuts(args.query, args.type, _dictionary_map(args))
    if not matches:
        print(f"'{args.query}' 검색 결과가 없습니다.")
        return

    print(f"=== '{args.query}' 검색 결과 ({len(matches)} 건) ===\n")
    for m in matches:
        cut = m.cut
        code = cut.peak_code or "----"
        print(f"  [{m.meat_type}/{m.category_key}#{m.index}] {code}  {cut.ko} / {cut.en} / {cut.th}")
        if cut.note:
            print(f"    {cut.note}")


def cmd_dict_lookup(args):
    """부위코드로 사전 항목 조회"""
    from meat365.dictionary import find_cut_by_peak_code
    from meat365.locale import resolve

    match = find_cut_by_peak_code(args.part_code)
    if match is None:
        print(f"부위코드 {args.part_code} 가 사전에 없습니다.")
        sys.exit(1)

    cut = match.cut
    print(f"{args.part_code}: {resolve(args.locale, cut)}")
    print(f"  축종/카테고리: {match.meat_type}/{match.category_key} (#{match.index})")
    print(f"  ko: {cut.ko}  en: {cut.en}  th: {cut.th}  my: {cut.my or '-'}  us: {cut.us}")
    if cut.ar:
        print(f"  ar: {cut.ar}")
    if cut.aliases:
        print(f"  별칭: {', '.join(cut.aliases)}")


def cmd_dict_stats(args):
    """부위 사전 통계"""
    from meat365.dictionary import get_meat_stats

    stats = get_meat_stats()
    print("=== 부위 사전 ===")
    for meat_type, count in stats.by_type.items():
        print(f"  {meat_type}: {count}")
    print(f"  합계: {stats.total}")


def _parse_assignments(pairs: list[str]) -> dict:
    fields = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"field=value 형식이 아닙니다: {pair}")
        if key == "aliases":
            fields[key] = [a.strip() for a in value.split(",") if a.strip()]
        else:
            fields[key] = value
    return fields


def cmd_override(args):
    """부위 사전 항목 수정 (오버라이드 저장)"""
    from meat365.dictionary import UnknownMeatTypeError

    try:
        fields = _parse_assignments(args.set)
    except ValueError as e:
        print(f"오류: {e}")
        sys.exit(1)
    if not fields:
        print("오류: --set field=value 를 하나 이상 지정하세요.")
        sys.exit(1)

    db = _open_db(args)
    try:
        doc_id = db.save_meat_cut_override(args.meat_type, args.category, args.index, fields)
    except (UnknownMeatTypeError, KeyError, IndexError) as e:
        print(f"오류: {e}")
        db.close()
        sys.exit(1)
    db.close()
    print(f"저장 완료: {doc_id}")


def cmd_overrides(args):
    """저장된 오버라이드 목록 / 삭제"""
    from meat365.db import MEAT_DICTIONARY

    db = _open_db(args)
    if args.delete:
        deleted = db.delete_document(MEAT_DICTIONARY, args.delete)
        db.close()
        print(f"삭제 완료: {args.delete}" if deleted else f"{args.delete} 를 찾을 수 없습니다.")
        return

    overrides = db.get_meat_cut_overrides()
    db.close()
    if not overrides:
        print("저장된 오버라이드가 없습니다.")
        return
    for o in overrides:
        changes = ", ".join(f"{k}={v}" for k, v in o.fields.items())
        print(f"  {o.id}  ({o.updated_at or '-'})  {changes}")


def cmd_upload(args):
    """제품 미디어 업로드"""
    from meat365.catalog import StorageKeyError
    from meat365.media import MediaError, MediaStore

    path = Path(args.file)
    if not path.exists():
        print(f"파일이 없습니다: {path}")
        sys.exit(1)
    mime_type = args.mime or mimetypes.guess_type(path.name)[0] or ""

    store = MediaStore(args.media_dir)
    db = _open_db(args)
    try:
        media = store.upload(
            args.code, args.category, path.name, path.read_bytes(), mime_type,
            media_type=args.type, tags=args.tag, compress=not args.no_compress,
        )
        db.add_spec_media(media)
    except (MediaError, StorageKeyError) as e:
        print(f"업로드 오류: {e}")
        db.close()
        sys.exit(1)
    db.close()
    print(f"업로드 완료: {media.path} ({media.file_size:,} bytes)")


def cmd_media(args):
    """제품 미디어 목록"""
    db = _open_db(args)
    if args.base:
        items = db.get_media_by_base_code(args.code, args.category)
    else:
        items = db.get_spec_media(args.code, args.category)
    db.close()

    if not items:
        print("미디어가 없습니다.")
        return
    for m in items:
        print(f"  [{m.category}/{m.type}] {m.path}  {m.mime_type}  {m.created_at or ''}")


def main(argv=None):
    # 실행 디렉토리의 .env. SpecDB / MediaStore 가 생성될 때 환경변수를 읽는다
    load_dotenv(find_dotenv(usecwd=True))

    parser = argparse.ArgumentParser(description="미트365 제품 스펙 관리")
    parser.add_argument("--db", help="SQLite 파일 경로 (기본: MEAT365_DB_PATH 또는 ./meat365.db)")
    parser.add_argument("-v", "--verbose", action="store_true", help="디버그 로그 출력")
    subparsers = parser.add_subparsers(dest="command")

    # parse
    p_parse = subparsers.add_parser("parse", help="제품 코드 파싱")
    p_parse.add_argument("codes", nargs="+", help="Peak 제품 코드")
    p_parse.add_argument("--locale", default="ko", help="표시 언어 (ko/th/my/en)")

    # import
    p_import = subparsers.add_parser("import", help="CSV 에서 제품 Import")
    p_import.add_argument("csv", help="CSV 파일 (헤더: code,type,name,unit)")
    p_import.add_argument("--commit", action="store_true", help="DB 에 저장")
    p_import.add_argument("--list", dest="verbose_list", action="store_true", help="변환된 제품 목록 표시")

    # products
    p_products = subparsers.add_parser("products", help="제품 목록 필터/검색")
    p_products.add_argument("query", nargs="*", help="검색어 (모두 포함)")
    p_products.add_argument("--species", help="P / B / C")
    p_products.add_argument("--storage", help="C / F")
    p_products.add_argument("--trade-type", help="1 / 2")
    p_products.add_argument("--part", help="부위코드 4자리")
    p_products.add_argument("--supplier", help="공급처 2자리")

    # dict-search
    p_search = subparsers.add_parser("dict-search", help="부위 사전 검색")
    p_search.add_argument("query", help="검색어")
    p_search.add_argument("--type", help="pork / beef / chicken")
    p_search.add_argument("--merged", action="store_true", help="저장된 오버라이드 적용")

    # dict-lookup
    p_lookup = subparsers.add_parser("dict-lookup", help="부위코드로 사전 조회")
    p_lookup.add_argument("part_code", help="부위코드 4자리")
    p_lookup.add_argument("--locale", default="ko", help="표시 언어 (ko/th/my/en/ar)")

    # dict-stats
    subparsers.add_parser("dict-stats", help="부위 사전 통계")

    # override
    p_override = subparsers.add_parser("override", help="부위 사전 항목 수정")
    p_override.add_argument("meat_type", help="pork / beef / chicken")
    p_override.add_argument("category", help="카테고리 키 (예: belly)")
    p_override.add_argument("index", type=int, help="카테고리 내 순번 (0부터)")
    p_override.add_argument("--set", action="append", default=[], metavar="FIELD=VALUE",
                            help="수정할 필드 (aliases 는 쉼표 구분)")

    # overrides
    p_overrides = subparsers.add_parser("overrides", help="오버라이드 목록")
    p_overrides.add_argument("--delete", metavar="ID", help="오버라이드 삭제")

    # upload
    p_upload = subparsers.add_parser("upload", help="제품 미디어 업로드")
    p_upload.add_argument("code", help="Peak 제품 코드")
    p_upload.add_argument("file", help="이미지/영상 파일")
    p_upload.add_argument("--category", default="reference", help="approved / rejected / reference / training")
    p_upload.add_argument("--type", default="cross_section", help="cross_section / appearance / defect / process_video / reference")
    p_upload.add_argument("--tag", action="append", default=[], help="태그 (여러 번 지정 가능)")
    p_upload.add_argument("--mime", help="MIME 타입 (기본: 확장자로 추정)")
    p_upload.add_argument("--media-dir", help="미디어 저장 디렉토리 (기본: MEAT365_MEDIA_DIR)")
    p_upload.add_argument("--no-compress", action="store_true", help="이미지 압축 안 함")

    # media
    p_media = subparsers.add_parser("media", help="제품 미디어 목록")
    p_media.add_argument("code", help="Peak 제품 코드 (--base 면 기본 코드)")
    p_media.add_argument("--base", action="store_true", help="기본 코드로 모든 변형의 미디어 조회")
    p_media.add_argument("--category", help="approved / rejected / reference / training")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "parse": cmd_parse,
        "import": cmd_import,
        "products": cmd_products,
        "dict-search": cmd_dict_search,
        "dict-lookup": cmd_dict_lookup,
        "dict-stats": cmd_dict_stats,
        "override": cmd_override,
        "overrides": cmd_overrides,
        "upload": cmd_upload,
        "media": cmd_media,
    }
    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return
    handler(args)


if __name__ == "__main__":
    main()
