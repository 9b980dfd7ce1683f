"""Texts for connection details, hosts and search results."""

from __future__ import annotations

from collections.abc import Mapping

from sniffnet.language import Language

L = Language


def _pick(table: Mapping[Language, str], language: Language) -> str:
    """Return the entry for ``language``, falling back to English."""
    return table.get(language, table[L.EN])


_NEW_VERSION_AVAILABLE = {
    L.EN: "A newer version is available on GitHub",
    L.IT: "Una versione più recente è disponibile su GitHub",
    L.RU: "Новая версия доступна на GitHub",
    L.EL: "Μια νεότερη έκδοση είναι διαθέσιμη στο GitHub",
    L.FA: "یک نسخه جدیدتر روی GitHub موجود است",
    L.SV: "En nyare version finns tillgänglig på GitHub",
    L.DE: "Eine neue Version ist auf GitHub verfügbar",
    L.TR: "Daha yeni bir versiyon GitHub'ta mevcut",
    L.ES: "Hay una nueva versión disponible en GitHub",
    L.KO: "GitHub에 새로운 버전이 출시되었습니다.",
    L.ZH: "新版本已在 Github 发布",
}

_INSPECT = {
    L.EN: "Inspect",
    L.IT: "Ispeziona",
    L.FR: "Inspecter",
    L.ES: "Inspeccionar",
    L.PL: "Sprawdź",
    L.DE: "Inspizieren",
    L.RU: "Инспектировать",
    L.SV: "Inspektera",
    L.TR: "İncele",
    L.FA: "بازرسی",
    L.KO: "검사",
    L.ZH: "检索",
}

_CONNECTION_DETAILS = {
    L.EN: "Connection details",
    L.IT: "Dettagli della connessione",
    L.RU: "Подробнее о соединении",
    L.SV: "Anslutningsdetaljer",
    L.DE: "Verbindungsdetails",
    L.TR: "Bağlantı detayları",
    L.FA: "مشخصات اتصال",
    L.ES: "Detalles de la Conexión",
    L.KO: "연결 상세",
    L.ZH: "连接详情",
}

_DROPPED_PACKETS = {
    L.EN: "Dropped packets",
    L.IT: "Pacchetti mancati",
    L.RU: "Потеряно пакетов",
    L.SV: "Tappade paket",
    L.DE: "Verlorene Pakete",
    L.TR: "Düşen paketler",
    L.FA: "بسته های رها شده",
    L.ES: "Paquetes perdidos",
    L.KO: "손실 패킷",
    L.ZH: "丢包计数",
}

_DATA_REPRESENTATION = {
    L.EN: "Data representation",
    L.IT: "Rappresentazione dei dati",
    L.RU: "Показывать в виде",
    L.SV: "Datarepresentation",
    L.DE: "Daten Darstellung",
    L.TR: "Veri gösterimi",
    L.FA: "بازنمایی داده ها",
    L.ES: "Representación de los datos",
    L.KO: "데이터 단위",
    L.ZH: "图表数据",
}

_HOST = {
    L.EN: "Network host",
    L.IT: "Host di rete",
    L.RU: "Сетевой хост",
    L.SV: "Nätverksvärd",
    L.DE: "Netzwerk-Host",
    L.TR: "Ağ sunucusu",
    L.FA: "میزبان شبکه",
    L.ES: "Host de red",
    L.KO: "네트워크 호스트",
    L.ZH: "主机",
}

_ONLY_TOP_30_HOSTS = {
    L.EN: "Only the top 30 hosts are displayed here",
    L.IT: "Solo i maggiori 30 host sono mostrati qui",
    L.RU: "Тут показываются только первые 30 хостов",
    L.SV: "Endast de 30 främsta värdarna visas här",
    L.DE: "Nur die obersten 30 Hosts werden hier angezeigt",
    L.TR: "Sadece ilk 30 sunucu burda gösterilmektedir",
    L.FA: "تنها ۳۰ میزبان برتر در اینجا نمایش داده شده اند",
    L.ES: "Aquí sólo se muestran los 30 mejores anfitriones",
    L.KO: "상위 30개의 호스트만 노출됩니다",
    L.ZH: "仅展示前 30 个主机",
}

_SORT_BY = {
    L.EN: "Sort by",
    L.IT: "Ordina per",
    L.RU: "Сортировка",
    L.SV: "Sortera efter",
    L.DE: "Sortieren nach",
    L.TR: "Şuna göre sırala",
    L.FA: "مرتب سازی بر اساس",
    L.ES: "Ordenar por",
    L.KO: "정렬",
    L.ZH: "排序",
}

_LOCAL = {
    L.EN: "Local network",
    L.IT: "Rete locale",
    L.RU: "Локальная сеть",
    L.SV: "Lokalt nätverk",
    L.DE: "Lokales Netzwerk",
    L.TR: "Yerel ağ",
    L.FA: "شبکه محلی",
    L.ES: "Red local",
    L.KO: "로컬 네트워크",
    L.ZH: "局域网",
}

_UNKNOWN = {
    L.EN: "Unknown location",
    L.IT: "Localizzazione sconosciuta",
    L.RU: "Неизвестный регион",
    L.SV: "Okänd plats",
    L.DE: "Ort unbekannt",
    L.TR: "Bilinmeyen yer",
    L.FA: "محل نامعلوم",
    L.ES: "Localización desconocida",
    L.KO: "알 수 없는 위치",
    L.ZH: "未知",
}

_YOUR_NETWORK_ADAPTER = {
    L.EN: "Your network adapter",
    L.IT: "La tua scheda di rete",
    L.RU: "Ваш сетевой адаптер",
    L.SV: "Din nätverksadapter",
    L.DE: "Dein Netzwerk-Adapter",
    L.TR: "Ağ adaptörün",
    L.FA: "مبدل شبکه شما",
    L.ES: "Su adaptador de red",
    L.KO: "네트워크 어댑터",
    L.ZH: "你的网络适配器",
}

_SOCKET_ADDRESS = {
    L.EN: "Socket address",
    L.IT: "Indirizzo del socket",
    L.RU: "Адрес сокекта",
    L.SV: "Socketadress",
    L.DE: "Socket Adresse",
    L.TR: "Soket adresi",
    L.FA: "پریز شبکه",
    L.ES: "Dirección del socket",
    L.KO: "소켓 어드레스",
    L.ZH: "套接字地址",
}

_MAC_ADDRESS = {
    L.EN: "MAC address",
    L.IT: "Indirizzo MAC",
    L.RU: "MAC адрес",
    L.SV: "MAC-adress",
    L.DE: "MAC Adresse",
    L.TR: "MAC adresi",
    L.FA: "آدرس MAC",
    L.ES: "Dirección MAC",
    L.KO: "맥 어드레스",
    L.ZH: "MAC 地址",
}

_SOURCE = {
    L.EN: "Source",
    L.IT: "Sorgente",
    L.RU: "Источник",
    L.SV: "Källa",
    L.DE: "Quelle",
    L.TR: "Kaynak",
    L.FA: "منبع",
    L.ES: "Origen",
    L.KO: "소스",
    L.ZH: "源",
}

_DESTINATION = {
    L.EN: "Destination",
    L.SV: "Destination",
    L.IT: "Destinazione",
    L.RU: "Получатель",
    L.DE: "Ziel",
    L.TR: "Hedef",
    L.FA: "مقصد",
    L.ES: "Destino",
    L.KO: "목적지",
    L.ZH: "目标",
}

_FQDN = {
    L.EN: "Fully qualified domain name",
    L.IT: "Nome di dominio completo",
    L.RU: "Полное доменное имя",
    L.SV: "Fullständigt domännamn",
    L.DE: "Vollständig qualifizierter Domain Name",
    L.TR: "Tam nitelikli alan adı",
    L.FA: "نام دامنه جامع الشرایط",
    L.ES: "Nombre de dominio completo",
    L.KO: "절대 도메인 네임",
    L.ZH: "FQDN",
}

_ADMINISTRATIVE_ENTITY = {
    L.EN: "Autonomous System name",
    L.IT: "Nome del sistema autonomo",
    L.RU: "Имя автономной системы",
    L.SV: "Administrativ enhet",
    L.DE: "Name des autonomen Systems",
    L.TR: "Yönetim varlığı",
    L.FA: "واحد اجرایی",
    L.ES: "Entidad Administrativa",
    L.KO: "관리 엔티티",
    L.ZH: "ASN 信息",
}

_TRANSMITTED_DATA = {
    L.EN: "Transmitted data",
    L.IT: "Dati trasmessi",
    L.RU: "Передано данных",
    L.SV: "Överförd data",
    L.DE: "Übermittelte Daten",
    L.TR: "Aktarılan veri",
    L.FA: "دادهٔ منتقل شده",
    L.ES: "Datos transmitidos",
    L.KO: "수신된 데이터",
    L.ZH: "数据传输",
}

_COUNTRY = {
    L.EN: "Country",
    L.IT: "Paese",
    L.RU: "Страна",
    L.SV: "Land",
    L.DE: "Land",
    L.TR: "Ülke",
    L.FA: "کشور",
    L.ES: "País",
    L.KO: "국가",
    L.ZH: "国家",
}

_DOMAIN_NAME = {
    L.EN: "Domain name",
    L.IT: "Nome di dominio",
    L.RU: "Доменное имя",
    L.SV: "Domännamn",
    L.DE: "Domain Name",
    L.TR: "Alan adı",
    L.FA: "نام دامنه",
    L.ES: "Nombre de dominio",
    L.KO: "도메인 네임",
    L.ZH: "域名",
}

_ONLY_SHOW_FAVORITES = {
    L.EN: "Only show favorites",
    L.IT: "Mostra solo i preferiti",
    L.RU: "Показывать только избранные",
    L.SV: "Visa endast favoriter",
    L.DE: "Zeige nur die Favoriten",
    L.TR: "Sadece favorileri göster",
    L.FA: "فقط پسندیده ها را نمایش بده",
    L.ES: "Mostrar solo los favoritos",
    L.KO: "즐겨찾기만 보기",
    L.ZH: "仅显示收藏",
}

_SEARCH_FILTERS = {
    L.EN: "Search filters",
    L.IT: "Filtri di ricerca",
    L.RU: "Фильтры для поиска",
    L.SV: "Sökfilter",
    L.DE: "Filter suchen",
    L.TR: "Arama filtresi",
    L.FA: "صافی های جستجو",
    L.ES: "Filtros de búsqueda",
    L.KO: "검색 필터",
    L.ZH: "搜索条件",
}

_NO_SEARCH_RESULTS = {
    L.EN: "No result available according to the specified search filters",
    L.IT: "Nessun risultato disponibile secondo i filtri di ricerca specificati",
    L.RU: "После применения выбранных фильтров результат поиска пустой",
    L.SV: "Inga resultat tillgängliga utifrån de angivna sökfilterna",
    L.DE: "Keine Resultate für die spezifizierten Such-Filter verfügbar",
    L.TR: "Belirtilen arama filtrelerine göre herhangi bir sonuç bulunmamaktadır",
    L.FA: "هیچ نتیجه ای بر اساس صافی های جستجوی تعیین شده وجود ندارد",
    L.ES: "No hay resultados disponibles según los filtros de búsqueda especificados",
    L.KO: "해당 검색 필터로 검색된 결과가 없습니다.",
    L.ZH: "没有符合条件的条目",
}

_SHOWING_RESULTS = {
    L.EN: "Showing {start}-{end} of {total} total results",
    L.IT: "Sono mostrati {start}-{end} di {total} risultati totali",
    L.RU: "Показываются {start}-{end} из {total} общего числа результатов",
    L.SV: "Visar {start}-{end} av {total} totala resultat",
    L.DE: "{start}-{end} von insgesamt {total} Resultaten werden angezeigt",
    L.TR: "{total} sonuç içinde {start}-{end}",
    L.FA: "نمایش {start}-{end} از تمامی {total} نتیجه",
    L.ES: "Mostrando {start}-{end} de {total} resultados totales",
    L.KO: "총 {total}개의 결과 중 {start}-{end}을(를) 보여줍니다",
    L.ZH: "显示累计 {total} 条目中第 {start}-{end} 个",
}

_COLOR_GRADIENTS = {
    L.EN: "Apply color gradients",
    L.IT: "Applica sfumature di colore",
    L.RU: "Применить цветовой градиент",
    L.SV: "Applicera färggradient",
    L.DE: "Farb-Gradienten anwenden",
    L.TR: "Renk grandyanı uygula",
    L.FA: "اعمال گرادیان های رنگ",
    L.ES: "Aplicar gradientes de color",
    L.KO: "그라디언트 색상 적용",
    L.ZH: "应用渐变色",
}


def new_version_available_translation(language: Language) -> str:
    return _pick(_NEW_VERSION_AVAILABLE, language)


def inspect_translation(language: Language) -> str:
    return _pick(_INSPECT, language)


def connection_details_translation(language: Language) -> str:
    return _pick(_CONNECTION_DETAILS, language)


def dropped_packets_translation(language: Language) -> str:
    return _pick(_DROPPED_PACKETS, language)


def data_representation_translation(language: Language) -> str:
    return _pick(_DATA_REPRESENTATION, language)


def host_translation(language: Language) -> str:
    return _pick(_HOST, language)


def only_top_30_hosts_translation(language: Language) -> str:
    return _pick(_ONLY_TOP_30_HOSTS, language)


def sort_by_translation(language: Language) -> str:
    return _pick(_SORT_BY, language)


def local_translation(language: Language) -> str:
    return _pick(_LOCAL, language)


def unknown_translation(language: Language) -> str:
    return _pick(_UNKNOWN, language)


def your_network_adapter_translation(language: Language) -> str:
    return _pick(_YOUR_NETWORK_ADAPTER, language)


def socket_address_translation(language: Language) -> str:
    return _pick(_SOCKET_ADDRESS, language)


def mac_address_translation(language: Language) -> str:
    return _pick(_MAC_ADDRESS, language)


def source_translation(language: Language) -> str:
    return _pick(_SOURCE, language)


def destination_translation(language: Language) -> str:
    return _pick(_DESTINATION, language)


def fqdn_translation(language: Language) -> str:
    return _pick(_FQDN, language)


def administrative_entity_translation(language: Language) -> str:
    return _pick(_ADMINISTRATIVE_ENTITY, language)


def transmitted_data_translation(language: Language) -> str:
    return _pick(_TRANSMITTED_DATA, language)


def country_translation(language: Language) -> str:
    return _pick(_COUNTRY, language)


def domain_name_translation(language: Language) -> str:
    return _pick(_DOMAIN_NAME, language)


def only_show_favorites_translation(language: Language) -> str:
    return _pick(_ONLY_SHOW_FAVORITES, language)


def search_filters_translation(language: Language) -> str:
    return _pick(_SEARCH_FILTERS, language)


def no_search_results_translation(language: Language) -> str:
    return _pick(_NO_SEARCH_RESULTS, language)


def showing_results_translation(language: Language, start: int, end: int, total: int) -> str:
    """Describe which slice of the search results is on screen."""
    return _pick(_SHOWING_RESULTS, language).format(start=start, end=end, total=total)


def color_gradients_translation(language: Language) -> str:
    return _pick(_COLOR_GRADIENTS, language)